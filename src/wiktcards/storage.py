"""JSON persistence of ``Word`` records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

from wiktcards.model import (
    PARTS_OF_SPEECH,
    Adjective,
    Example,
    Meaning,
    Noun,
    NounGender,
    PartOfSpeech,
    Pronunciation,
    Word,
)


def _pos_to_dict(pos: PartOfSpeech) -> dict[str, Any]:
    data: dict[str, Any] = {"pos": pos.name}
    if isinstance(pos, Noun):
        data["gender"] = pos.gender.value if pos.gender else None
    elif isinstance(pos, Adjective):
        data["feminine"] = pos.feminine
        data["masculine_plural"] = pos.masculine_plural
        data["feminine_plural"] = pos.feminine_plural
    return data


def _pos_from_dict(data: dict[str, Any]) -> PartOfSpeech:
    name = data["pos"]
    try:
        cls = PARTS_OF_SPEECH[name]
    except KeyError:
        raise ValueError(f"Unknown part of speech {name!r}") from None
    if cls is Noun:
        gender = data.get("gender")
        return Noun(gender=NounGender(gender) if gender else None)
    if cls is Adjective:
        return Adjective(
            feminine=data.get("feminine"),
            masculine_plural=data.get("masculine_plural"),
            feminine_plural=data.get("feminine_plural"),
        )
    return cls()


def word_to_dict(word: Word) -> dict[str, Any]:
    pronunciation: Optional[dict[str, str]] = None
    if word.pronunciation is not None:
        pronunciation = {
            "ipa": word.pronunciation.ipa,
            "audio_url": word.pronunciation.audio_url,
        }
    return {
        "word": word.word,
        "lang": word.lang,
        "lang_code": word.lang_code,
        "link": word.link,
        "pronunciation": pronunciation,
        "meanings": [
            {
                **_pos_to_dict(meaning.pos),
                "definition": meaning.definition,
                "examples": [
                    {"text": ex.text, "translation": ex.translation}
                    for ex in meaning.examples
                ],
            }
            for meaning in word.meanings
        ],
    }


def word_from_dict(data: dict[str, Any]) -> Word:
    pronunciation = None
    if data.get("pronunciation"):
        pronunciation = Pronunciation(
            ipa=data["pronunciation"]["ipa"],
            audio_url=data["pronunciation"]["audio_url"],
        )
    meanings = tuple(
        Meaning(
            pos=_pos_from_dict(item),
            definition=item["definition"],
            examples=tuple(
                Example(text=ex["text"], translation=ex.get("translation"))
                for ex in item.get("examples") or []
            ),
        )
        for item in data.get("meanings") or []
    )
    return Word(
        word=data["word"],
        link=data["link"],
        lang=data.get("lang", ""),
        lang_code=data.get("lang_code", ""),
        pronunciation=pronunciation,
        meanings=meanings,
    )


def write_jsonl(path: Path, words: Iterable[Word]) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as f:
        for word in words:
            f.write(json.dumps(word_to_dict(word), ensure_ascii=False) + "\n")
            count += 1
    return count


def read_jsonl(path: Path) -> list[Word]:
    words: list[Word] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            words.append(word_from_dict(json.loads(line)))
    return words


def dump_json(words: Iterable[Word], path: Path) -> None:
    """Write ``words`` as one indented JSON array."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [word_to_dict(word) for word in words]
    path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
    )
