"""Extract single-language Wiktionary entries into typed records."""

from wiktcards.config import ExtractorConfig
from wiktcards.entry_parser import extract_word
from wiktcards.errors import (
    AmbiguousMeaningError,
    ExtractionError,
    FetchError,
    MalformedError,
    NotFoundError,
    WiktcardsError,
)
from wiktcards.model import (
    Adjective,
    Adverb,
    Determiner,
    Example,
    Interjection,
    Meaning,
    Noun,
    NounGender,
    Numeral,
    PartOfSpeech,
    Preposition,
    Pronoun,
    Pronunciation,
    Verb,
    Word,
)

__all__ = [
    "Adjective",
    "Adverb",
    "AmbiguousMeaningError",
    "Determiner",
    "Example",
    "ExtractionError",
    "ExtractorConfig",
    "FetchError",
    "Interjection",
    "MalformedError",
    "Meaning",
    "NotFoundError",
    "Noun",
    "NounGender",
    "Numeral",
    "PartOfSpeech",
    "Preposition",
    "Pronoun",
    "Pronunciation",
    "Verb",
    "WiktcardsError",
    "Word",
    "extract_word",
]
