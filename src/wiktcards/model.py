"""Typed records produced by the entry extractor.

All records are frozen dataclasses holding plain strings, so nothing
extracted keeps a reference into the parsed document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional


class NounGender(Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"


@dataclass(frozen=True)
class PartOfSpeech:
    """Base of the closed set of part-of-speech variants.

    ``name`` is both the serialized tag and the lowercased heading label
    the variant is recognized under.
    """

    name: ClassVar[str] = ""


@dataclass(frozen=True)
class Noun(PartOfSpeech):
    name: ClassVar[str] = "noun"
    gender: Optional[NounGender] = None


@dataclass(frozen=True)
class Verb(PartOfSpeech):
    name: ClassVar[str] = "verb"


@dataclass(frozen=True)
class Adjective(PartOfSpeech):
    name: ClassVar[str] = "adjective"
    feminine: Optional[str] = None
    masculine_plural: Optional[str] = None
    feminine_plural: Optional[str] = None


@dataclass(frozen=True)
class Pronoun(PartOfSpeech):
    name: ClassVar[str] = "pronoun"


@dataclass(frozen=True)
class Adverb(PartOfSpeech):
    name: ClassVar[str] = "adverb"


@dataclass(frozen=True)
class Numeral(PartOfSpeech):
    name: ClassVar[str] = "numeral"


@dataclass(frozen=True)
class Determiner(PartOfSpeech):
    name: ClassVar[str] = "determiner"


@dataclass(frozen=True)
class Preposition(PartOfSpeech):
    name: ClassVar[str] = "preposition"


@dataclass(frozen=True)
class Interjection(PartOfSpeech):
    name: ClassVar[str] = "interjection"


PARTS_OF_SPEECH: dict[str, type[PartOfSpeech]] = {
    cls.name: cls
    for cls in (
        Noun,
        Verb,
        Adjective,
        Pronoun,
        Adverb,
        Numeral,
        Determiner,
        Preposition,
        Interjection,
    )
}


@dataclass(frozen=True)
class Example:
    text: str
    translation: Optional[str] = None


@dataclass(frozen=True)
class Meaning:
    pos: PartOfSpeech
    definition: str
    examples: tuple[Example, ...] = ()


@dataclass(frozen=True)
class Pronunciation:
    ipa: str
    audio_url: str


@dataclass(frozen=True)
class Word:
    """One extracted entry.

    ``meanings`` is in document order.  An empty tuple means the page had
    no recognized part-of-speech subsection and the lookup is partial.
    """

    word: str
    link: str
    lang: str
    lang_code: str
    pronunciation: Optional[Pronunciation] = None
    meanings: tuple[Meaning, ...] = ()
