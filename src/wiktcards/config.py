"""Extraction settings shared by the parser, the fetcher and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote

from mediawiki_langcodes import name_to_code

DEFAULT_BASE_URL = "https://en.wiktionary.org/wiki/"
DEFAULT_USER_AGENT = "wiktcards/0.1 (flashcard builder; python-urllib)"


@dataclass
class ExtractorConfig:
    """Constants that select which part of a page is extracted.

    ``language`` must match the visible label of the language heading
    exactly (``"French"``, ``"Old French"``).  Subsections may sit one
    level deeper than usual when a page splits etymologies, so both
    ``subsection_levels`` are accepted.
    """

    language: str = "French"
    language_level: str = "h2"
    subsection_levels: tuple[str, ...] = ("h3", "h4")
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    keep_example_markup: bool = False
    lang_code: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.lang_code = name_to_code(self.language, "en") or ""

    @property
    def anchor(self) -> str:
        return self.language.replace(" ", "_")

    def page_url(self, word: str) -> str:
        return self.base_url + quote(word.replace(" ", "_"))

    def reference_link(self, word: str) -> str:
        return f"{self.page_url(word)}#{self.anchor}"
