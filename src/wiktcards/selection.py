"""Choosing meanings of an extracted word."""

from __future__ import annotations

from wiktcards.errors import AmbiguousMeaningError, NotFoundError
from wiktcards.model import Meaning, Word


def meanings_of(word: Word, pos_name: str) -> list[Meaning]:
    """Meanings of ``word`` whose part of speech is ``pos_name``."""
    pos_name = pos_name.lower()
    return [m for m in word.meanings if m.pos.name == pos_name]


def select_meaning(word: Word, hint: str) -> Meaning:
    """The single meaning whose definition contains ``hint``.

    Matching ignores case.  Raises ``NotFoundError`` when nothing matches
    and ``AmbiguousMeaningError`` when several meanings do.
    """
    needle = hint.casefold()
    matches = [m for m in word.meanings if needle in m.definition.casefold()]
    if not matches:
        raise NotFoundError(f"No meaning of {word.word!r} matches {hint!r}")
    if len(matches) > 1:
        raise AmbiguousMeaningError(hint, [m.definition for m in matches])
    return matches[0]
