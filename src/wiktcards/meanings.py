"""Definitions and usage examples from a part-of-speech subsection.

A subsection lists its senses in the first ``<ol>`` after the heading.
Each ``<li>`` holds the definition followed, optionally, by one trailing
container of examples in one of two layouts:

* inline examples: a ``<dl>`` with ``div.h-usage-example`` blocks whose
  sentence is in ``i.Latn.mention.e-example``;
* expandable quotations: a ``<ul>`` whose items carry the sentence in
  ``span.e-quotation``.

Both layouts put the translation in ``span.e-translation``.
"""

from __future__ import annotations

import logging
from typing import Optional

from lxml import html

from wiktcards.errors import MalformedError, NotFoundError
from wiktcards.model import Example, Meaning, PartOfSpeech
from wiktcards.sections import Section
from wiktcards.tree import (
    find_first_by_tag,
    get_children,
    inner_html,
    is_element,
    select_all,
    select_first,
    text_of,
)

logger = logging.getLogger(__name__)

# Trailing parentheticals at least this long are usage notes.
MIN_NOTE_LENGTH = 15

INLINE_SENTENCE = ("i", "Latn", "mention", "e-example")
QUOTATION_SENTENCE = ("span", "e-quotation")
TRANSLATION = ("span", "e-translation")


def _split_trailing_parenthetical(text: str) -> Optional[tuple[str, str]]:
    """Split ``"X (Y)"`` into ``("X", "Y")``, with ``Y`` balanced."""
    if not text.endswith(")"):
        return None
    depth = 0
    for idx in range(len(text) - 1, -1, -1):
        char = text[idx]
        if char == ")":
            depth += 1
        elif char == "(":
            depth -= 1
            if depth == 0:
                if idx == 0 or text[idx - 1] != " ":
                    return None
                return text[: idx - 1].rstrip(), text[idx + 1 : -1]
    return None


def shorten_meaning(meaning: str) -> str:
    """Drop trailing parentheticals of ``MIN_NOTE_LENGTH`` characters or more.

    >>> shorten_meaning("cat (an animal)")
    'cat (an animal)'
    >>> shorten_meaning("to lay (of a bird: to produce eggs)")
    'to lay'
    """
    while True:
        split = _split_trailing_parenthetical(meaning)
        if split is None or len(split[1]) < MIN_NOTE_LENGTH:
            return meaning
        meaning = split[0]


def _node_contents(node: html.HtmlElement, keep_markup: bool) -> str:
    return inner_html(node) if keep_markup else text_of(node)


def parse_example(
    container: html.HtmlElement,
    sentence_selector: tuple[str, ...],
    keep_markup: bool = False,
) -> Optional[Example]:
    """One example from an inline usage block or a quotation list item.

    Returns ``None`` if the container holds no sentence; raises
    ``MalformedError`` if the sentence node is empty.
    """
    sentence_node = select_first(container, *sentence_selector)
    if sentence_node is None:
        return None
    sentence = _node_contents(sentence_node, keep_markup).strip()
    if not sentence:
        raise MalformedError("Example sentence node has no content")
    translation_node = select_first(container, *TRANSLATION)
    translation = None
    if translation_node is not None:
        translation = _node_contents(translation_node, keep_markup).strip() or None
    return Example(text=sentence, translation=translation)


def _examples_container(
    item: html.HtmlElement,
) -> tuple[Optional[html.HtmlElement], list[html.HtmlElement], tuple[str, ...]]:
    """The trailing example container of a sense, its example blocks and
    the selector for the sentence inside each block."""
    children = get_children(item)
    if not children:
        return None, [], ()
    last = children[-1]
    if last.tail and last.tail.strip():
        return None, [], ()
    if last.tag == "dl":
        return last, select_all(last, "div", "h-usage-example"), INLINE_SENTENCE
    if last.tag == "ul":
        return last, select_all(last, "li"), QUOTATION_SENTENCE
    return None, [], ()


def _definition_text(item: html.HtmlElement, container) -> str:
    parts = [item.text or ""]
    for child in item:
        if child is container:
            continue
        if is_element(child):
            parts.append(text_of(child))
        parts.append(child.tail or "")
    # Definitions are a single line; what follows is explanatory clutter.
    return "".join(parts).strip().split("\n")[0].strip()


def parse_meaning_item(
    item: html.HtmlElement, pos: PartOfSpeech, keep_markup: bool = False
) -> Optional[Meaning]:
    container, blocks, sentence_selector = _examples_container(item)
    examples = []
    for block in blocks:
        try:
            example = parse_example(block, sentence_selector, keep_markup)
        except MalformedError as exc:
            logger.debug("Skipping example: %s", exc)
            continue
        if example is not None:
            examples.append(example)

    definition = shorten_meaning(_definition_text(item, container))
    if not definition:
        logger.debug("Skipping sense without definition text")
        return None
    return Meaning(pos=pos, definition=definition, examples=tuple(examples))


def parse_meanings(
    section: Section, pos: PartOfSpeech, keep_markup: bool = False
) -> list[Meaning]:
    """Every sense listed under a part-of-speech heading, in order."""
    ol = find_first_by_tag(section[1:], "ol")
    if ol is None:
        raise NotFoundError("No ordered list of definitions")
    meanings = []
    for item in get_children(ol):
        if item.tag != "li":
            continue
        meaning = parse_meaning_item(item, pos, keep_markup)
        if meaning is not None:
            meanings.append(meaning)
    return meanings
