import logging
from pathlib import Path

import pytest

from wiktcards.config import ExtractorConfig
from wiktcards.entry_parser import POS_BUILDERS, extract_word
from wiktcards.errors import NotFoundError
from wiktcards.model import (
    Adjective,
    Adverb,
    Example,
    Meaning,
    Noun,
    NounGender,
    Pronunciation,
)


def _load_fixture(name: str) -> str:
    return (Path(__file__).parent / "data" / name).read_text(encoding="utf-8")


def _page(body: str) -> str:
    return f'<html><body><div class="mw-parser-output">{body}</div></body></html>'


CAT_SECTION = (
    "<h3>Noun</h3>"
    "<ol><li>cat (an animal)<dl><dd>"
    '<div class="h-usage-example"><i class="Latn mention e-example" lang="fr">'
    "J'ai un chat</i> ― <span class=\"e-translation\">I have a cat</span></div>"
    "</dd></dl></li></ol>"
    "<h3>Anagrams</h3>"
)


def test_single_noun_with_inline_example():
    word = extract_word(_page("<h2>French</h2>" + CAT_SECTION), "chat")
    assert word.meanings == (
        Meaning(
            pos=Noun(gender=None),
            definition="cat (an animal)",
            examples=(Example("J'ai un chat", "I have a cat"),),
        ),
    )
    assert word.pronunciation is None
    assert word.link == "https://en.wiktionary.org/wiki/chat#French"


def test_missing_language_fails():
    with pytest.raises(NotFoundError):
        extract_word(_page("<h2>English</h2>" + CAT_SECTION), "chat")


def test_language_label_must_match_exactly():
    with pytest.raises(NotFoundError):
        extract_word(_page("<h2>Middle French</h2>" + CAT_SECTION), "chat")


def test_document_without_content_fails():
    with pytest.raises(NotFoundError):
        extract_word("<html><head></head></html>", "chat")


def test_region_without_parts_of_speech_has_no_meanings():
    page = _page("<h2>French</h2><h3>Etymology</h3><p>x</p><h3>Anagrams</h3>")
    assert extract_word(page, "x").meanings == ()


def test_adjective_scenario():
    page = _page(
        "<h2>French</h2><h3>Adjective</h3>"
        "<p><strong>grand</strong> <i>feminine</i><b>grande</b></p>"
        "<ol><li>big</li></ol><h3>Anagrams</h3>"
    )
    (meaning,) = extract_word(page, "grand").meanings
    assert meaning.pos == Adjective(feminine="grande")
    assert meaning.definition == "big"


def test_every_fixed_part_of_speech_is_recognized():
    assert set(POS_BUILDERS) == {
        "Noun",
        "Verb",
        "Adjective",
        "Pronoun",
        "Adverb",
        "Numeral",
        "Determiner",
        "Preposition",
        "Interjection",
    }


def test_chat_fixture():
    word = extract_word(_load_fixture("chat.html"), "chat")

    assert word.lang == "French"
    assert word.lang_code == "fr"
    assert word.pronunciation == Pronunciation(
        ipa="/ʃa/",
        audio_url="https://upload.wikimedia.org/wikipedia/commons/a/a1/Fr-chat.ogg",
    )
    masculine = Noun(gender=NounGender.MASCULINE)
    assert [m.pos for m in word.meanings] == [masculine] * 3
    assert [m.definition for m in word.meanings] == [
        "cat (an animal)",
        "tomcat",
        "(informal) pussy, kitty",
    ]
    assert word.meanings[0].examples == (Example("J'ai un chat", "I have a cat"),)
    assert word.meanings[1].examples == (
        Example("Le chat dormait au soleil.", "The tomcat slept in the sun."),
        Example("Un chat noir passa.", None),
    )
    # Both inline blocks of the third sense are unusable.
    assert word.meanings[2].examples == ()


def test_chat_fixture_ignores_other_languages():
    word = extract_word(_load_fixture("chat.html"), "chat")
    definitions = [m.definition for m in word.meanings]
    assert "To talk in an informal manner." not in definitions
    assert "cat (feline animal kept as a pet)" not in definitions


def test_other_language_in_same_page():
    config = ExtractorConfig(language="Middle French")
    word = extract_word(_load_fixture("chat.html"), "chat", config)
    # "References" closes the only subsection.
    assert [m.definition for m in word.meanings] == ["cat"]
    assert word.link == "https://en.wiktionary.org/wiki/chat#Middle_French"


def test_grand_fixture_skips_broken_subsection(caplog):
    with caplog.at_level(logging.WARNING, logger="wiktcards.entry_parser"):
        word = extract_word(_load_fixture("grand.html"), "grand")

    forms = Adjective(
        feminine="grande", masculine_plural="grands", feminine_plural="grandes"
    )
    assert [(m.pos, m.definition) for m in word.meanings] == [
        (forms, "big, large"),
        (forms, "tall"),
        (forms, "great"),
        (Adverb(), "wide, widely"),
        (Noun(gender=NounGender.MASCULINE), "adult, grown-up"),
    ]
    assert word.meanings[0].examples == (Example("une grande maison", "a big house"),)
    assert word.meanings[3].examples == (Example("ouvrir grand les yeux"),)
    # Pronunciation without audio is not represented.
    assert word.pronunciation is None
    assert "'Verb'" in caplog.text


def test_keep_example_markup():
    config = ExtractorConfig(keep_example_markup=True)
    word = extract_word(_load_fixture("grand.html"), "grand", config)
    assert word.meanings[0].examples[0].text == "une <b>grande</b> maison"


def test_adjective_without_head_paragraph_is_skipped():
    page = _page(
        "<h2>French</h2><h3>Adjective</h3><ol><li>big</li></ol>"
        "<h3>Noun</h3><p><abbr>f</abbr></p><ol><li>tall woman</li></ol>"
        "<h3>Anagrams</h3>"
    )
    (meaning,) = extract_word(page, "grande").meanings
    assert meaning == Meaning(Noun(gender=NounGender.FEMININE), "tall woman")


def test_pronunciation_without_audio_does_not_replace_earlier_one():
    page = _page(
        "<h2>French</h2>"
        '<h3>Pronunciation</h3><ul><li><span class="IPA">/a/</span>'
        '<audio><source src="//upload.wikimedia.org/Fr-a.ogg"></audio></li></ul>'
        '<h3>Pronunciation</h3><ul><li><span class="IPA">/ɑ/</span></li></ul>'
        "<h3>Anagrams</h3>"
    )
    word = extract_word(page, "a")
    assert word.pronunciation == Pronunciation(
        ipa="/a/", audio_url="https://upload.wikimedia.org/Fr-a.ogg"
    )
