"""Flatten ``Word`` records into rows for a flashcard import file."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from wiktcards.errors import AmbiguousMeaningError, NotFoundError
from wiktcards.model import Example, Meaning, Noun, NounGender, Word
from wiktcards.selection import select_meaning

logger = logging.getLogger(__name__)

FLASHCARD_FIELDS = (
    "word",
    "word_with_article",
    "ipa",
    "gender",
    "meaning",
    "example",
    "example_untranslated",
    "wiki_link",
    "audio",
)

ELIDING_INITIALS = "aâàeéèêëiîïoôuùûüyh"


def with_article(word: str, gender: Optional[NounGender]) -> str:
    if gender is None:
        return word
    if word[:1].lower() in ELIDING_INITIALS:
        return f"l'{word}"
    return ("le " if gender is NounGender.MASCULINE else "la ") + word


def _noun_gender(meanings: Sequence[Meaning]) -> Optional[NounGender]:
    for meaning in meanings:
        if isinstance(meaning.pos, Noun) and meaning.pos.gender is not None:
            return meaning.pos.gender
    return None


def _first_example(meanings: Sequence[Meaning]) -> Optional[Example]:
    for meaning in meanings:
        if meaning.examples:
            return meaning.examples[0]
    return None


def _chosen_meanings(word: Word, hint: Optional[str]) -> Sequence[Meaning]:
    if not hint:
        return word.meanings
    try:
        return [select_meaning(word, hint)]
    except (NotFoundError, AmbiguousMeaningError) as exc:
        logger.warning("Using every meaning of %r: %s", word.word, exc)
        return word.meanings


def build_row(
    word: Word, hint: Optional[str] = None, audio_filename: Optional[str] = None
) -> dict[str, str]:
    """One flashcard row.

    With a ``hint`` that picks out exactly one meaning, only that meaning
    (and its examples) go on the card; otherwise all of them do.
    """
    meanings = _chosen_meanings(word, hint)
    gender = _noun_gender(meanings)
    example = _first_example(meanings)
    row = dict.fromkeys(FLASHCARD_FIELDS, "")
    row.update(
        word=word.word,
        word_with_article=with_article(word.word, gender),
        ipa=word.pronunciation.ipa if word.pronunciation else "",
        gender=gender.value if gender else "",
        meaning="; ".join(m.definition for m in meanings),
        wiki_link=word.link,
    )
    if example is not None:
        row["example"] = example.text
        if example.translation:
            row["example"] += f" -- {example.translation}"
        row["example_untranslated"] = example.text
    if audio_filename:
        row["audio"] = f"[sound:{audio_filename}]"
    return row


def write_rows(path: Path, rows: Iterable[dict[str, str]]) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FLASHCARD_FIELDS, delimiter="\t")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
            count += 1
    return count
