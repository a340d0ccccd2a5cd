"""Pronunciation and inflection data read from inline annotations."""

from __future__ import annotations

import logging
from typing import Optional

from wiktcards.errors import NotFoundError
from wiktcards.model import Adjective, NounGender, Pronunciation
from wiktcards.sections import Section
from wiktcards.tree import (
    find_first_by_tag,
    get_children,
    immediate_text,
    select_first,
    text_of,
)

logger = logging.getLogger(__name__)

GENDER_ABBREVIATIONS = {
    "m": NounGender.MASCULINE,
    "f": NounGender.FEMININE,
}

ADJECTIVE_FORM_LABELS = {
    "feminine": "feminine",
    "masculine plural": "masculine_plural",
    "feminine plural": "feminine_plural",
}


def absolute_url(url: str, scheme: str = "https") -> str:
    if url.startswith("//"):
        return f"{scheme}:{url}"
    return url


def parse_pronunciation(section: Section) -> Optional[Pronunciation]:
    """IPA and audio URL from the first list under a "Pronunciation" heading.

    Both parts are required; a transcription without audio (or the
    reverse) yields ``None``.
    """
    ul = find_first_by_tag(section[1:], "ul")
    if ul is None:
        return None
    ipa_node = select_first(ul, "span", "IPA")
    ipa = immediate_text(ipa_node) if ipa_node is not None else None
    source = select_first(ul, "source")
    src = source.get("src") if source is not None else None
    if not ipa or not src:
        logger.debug("Incomplete pronunciation (ipa=%r, audio=%r)", ipa, src)
        return None
    return Pronunciation(ipa=ipa, audio_url=absolute_url(src))


def parse_noun_gender(section: Section) -> Optional[NounGender]:
    paragraph = find_first_by_tag(section, "p")
    if paragraph is None:
        return None
    abbr = select_first(paragraph, "abbr")
    if abbr is None:
        return None
    return GENDER_ABBREVIATIONS.get(immediate_text(abbr) or "")


def parse_adjective_forms(section: Section) -> Adjective:
    """Inflected forms from the head paragraph of an adjective subsection.

    The head line reads ``<i>feminine</i> <b>grande</b>, <i>masculine
    plural</i> <b>grands</b> ...``; each label is an italic element
    directly followed by the bold form.  Newer pages wrap the line in
    ``span.headword-line``, whose children are scanned instead.
    """
    paragraph = find_first_by_tag(section, "p")
    if paragraph is None:
        raise NotFoundError("No head paragraph with adjective forms")
    headword_line = select_first(paragraph, "span", "headword-line")
    if headword_line is not None:
        paragraph = headword_line
    forms: dict[str, str] = {}
    children = get_children(paragraph)
    for label_node, form_node in zip(children, children[1:]):
        if label_node.tag != "i" or form_node.tag != "b":
            continue
        field_name = ADJECTIVE_FORM_LABELS.get(text_of(label_node).strip())
        if field_name is None:
            continue
        forms[field_name] = text_of(form_node).strip()
    return Adjective(**forms)
