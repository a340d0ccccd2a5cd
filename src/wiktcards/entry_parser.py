"""Turn a rendered Wiktionary page into a ``Word`` record.

The page is segmented purely by headings: the language heading selects a
region, its sub-headings split it into subsections, and each subsection
is dispatched on its heading label.  Labels without a parser (etymology,
anagrams, related terms) are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from wiktcards.config import ExtractorConfig
from wiktcards.errors import ExtractionError, NotFoundError
from wiktcards.grammar import (
    parse_adjective_forms,
    parse_noun_gender,
    parse_pronunciation,
)
from wiktcards.meanings import parse_meanings
from wiktcards.model import (
    PARTS_OF_SPEECH,
    Meaning,
    Noun,
    PartOfSpeech,
    Pronunciation,
    Word,
)
from wiktcards.sections import (
    Section,
    select_language_region,
    split_into_subsections,
)
from wiktcards.tree import (
    content_root,
    get_children,
    heading_text,
    parse_document,
)

logger = logging.getLogger(__name__)

PRONUNCIATION_LABEL = "Pronunciation"


def _fixed(cls: type[PartOfSpeech]) -> Callable[[Section], PartOfSpeech]:
    return lambda section: cls()


def _noun(section: Section) -> Noun:
    return Noun(gender=parse_noun_gender(section))


# Heading label -> builder of the part of speech shared by the
# subsection's meanings.
POS_BUILDERS: dict[str, Callable[[Section], PartOfSpeech]] = {
    name.capitalize(): _fixed(cls) for name, cls in PARTS_OF_SPEECH.items()
}
POS_BUILDERS["Noun"] = _noun
POS_BUILDERS["Adjective"] = parse_adjective_forms


@dataclass
class _SectionResult:
    """What a single subsection contributes to the entry."""

    pronunciation: Optional[Pronunciation] = None
    meanings: tuple[Meaning, ...] = ()


def classify_section(
    section: Section, config: ExtractorConfig
) -> Optional[_SectionResult]:
    """Parse ``section`` according to its heading label.

    Returns ``None`` for labels that carry no lexical data.  Raises
    ``ExtractionError`` when a recognized subsection lacks the structure
    its parser requires.
    """
    label = heading_text(section[0])
    if label is None:
        return None
    if label == PRONUNCIATION_LABEL:
        return _SectionResult(pronunciation=parse_pronunciation(section))
    builder = POS_BUILDERS.get(label)
    if builder is None:
        return None
    pos = builder(section)
    meanings = parse_meanings(section, pos, config.keep_example_markup)
    return _SectionResult(meanings=tuple(meanings))


def language_sections(doc, config: ExtractorConfig) -> list[Section]:
    """Subsections of the configured language's region of ``doc``."""
    root = content_root(doc)
    if root is None:
        raise NotFoundError("Document has no article content")
    region = select_language_region(
        get_children(root), config.language, config.language_level
    )
    if region is None:
        raise NotFoundError(f"No {config.language} section")
    return split_into_subsections(region, config.subsection_levels)


def extract_word(
    html_text: str, word: str, config: Optional[ExtractorConfig] = None
) -> Word:
    """Extract the configured language's entry for ``word``.

    Raises ``NotFoundError`` if the page has no region for the language.
    A subsection that fails to parse is logged and skipped; the others
    still contribute.
    """
    if config is None:
        config = ExtractorConfig()
    doc = parse_document(html_text)

    results: list[_SectionResult] = []
    for section in language_sections(doc, config):
        try:
            result = classify_section(section, config)
        except ExtractionError as exc:
            logger.warning(
                "Skipping %r section of %r: %s", heading_text(section[0]), word, exc
            )
            continue
        if result is not None:
            results.append(result)

    pronunciation = None
    meanings: list[Meaning] = []
    for result in results:
        if result.pronunciation is not None:
            pronunciation = result.pronunciation
        meanings.extend(result.meanings)

    if not meanings:
        logger.info("No recognized part of speech for %r", word)

    return Word(
        word=word,
        link=config.reference_link(word),
        lang=config.language,
        lang_code=config.lang_code,
        pronunciation=pronunciation,
        meanings=tuple(meanings),
    )
