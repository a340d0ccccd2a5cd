import json

import pytest

from wiktcards.model import (
    Adjective,
    Example,
    Interjection,
    Meaning,
    Noun,
    NounGender,
    Pronunciation,
    Verb,
    Word,
)
from wiktcards.storage import (
    dump_json,
    read_jsonl,
    word_from_dict,
    word_to_dict,
    write_jsonl,
)

CHAT = Word(
    word="chat",
    link="https://en.wiktionary.org/wiki/chat#French",
    lang="French",
    lang_code="fr",
    pronunciation=Pronunciation("/ʃa/", "https://upload.wikimedia.org/Fr-chat.ogg"),
    meanings=(
        Meaning(
            Noun(gender=NounGender.MASCULINE),
            "cat",
            (Example("J'ai un chat", "I have a cat"), Example("Un chat noir.")),
        ),
        Meaning(Noun(), "tomcat"),
    ),
)

GRAND = Word(
    word="grand",
    link="https://en.wiktionary.org/wiki/grand#French",
    lang="French",
    lang_code="fr",
    meanings=(
        Meaning(Adjective(feminine="grande", feminine_plural="grandes"), "big"),
        Meaning(Verb(), "to grow"),
        Meaning(Interjection(), "great!"),
    ),
)


def test_dict_layout():
    data = word_to_dict(CHAT)
    assert data["meanings"][0] == {
        "pos": "noun",
        "gender": "masculine",
        "definition": "cat",
        "examples": [
            {"text": "J'ai un chat", "translation": "I have a cat"},
            {"text": "Un chat noir.", "translation": None},
        ],
    }
    assert word_to_dict(GRAND)["meanings"][0] == {
        "pos": "adjective",
        "feminine": "grande",
        "masculine_plural": None,
        "feminine_plural": "grandes",
        "definition": "big",
        "examples": [],
    }
    assert word_to_dict(GRAND)["pronunciation"] is None


@pytest.mark.parametrize("word", [CHAT, GRAND])
def test_round_trip_through_json(word):
    assert word_from_dict(json.loads(json.dumps(word_to_dict(word)))) == word


def test_jsonl_files(tmp_path):
    path = tmp_path / "out" / "words.jsonl"
    assert write_jsonl(path, [CHAT, GRAND]) == 2
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "ʃa" in lines[0]
    assert read_jsonl(path) == [CHAT, GRAND]


def test_dump_json(tmp_path):
    path = tmp_path / "words.json"
    dump_json([CHAT], path)
    assert [word_from_dict(d) for d in json.loads(path.read_text("utf-8"))] == [CHAT]


def test_unknown_part_of_speech():
    data = word_to_dict(GRAND)
    data["meanings"][0]["pos"] = "suffix"
    with pytest.raises(ValueError):
        word_from_dict(data)
