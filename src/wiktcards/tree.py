"""Read-only helpers over an lxml HTML tree.

Every lookup returns ``None`` (or an empty list) when nothing matches;
callers decide whether absence is fatal.
"""

from __future__ import annotations

import html as html_escape
from functools import lru_cache
from typing import Iterable, Optional

from lxml import etree, html

from wiktcards.errors import MalformedError

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def parse_document(html_text: str) -> html.HtmlElement:
    try:
        return html.fromstring(html_text)
    except (etree.ParserError, ValueError) as exc:
        raise MalformedError(f"Cannot parse document: {exc}") from exc


def _class_predicate(class_name: str) -> str:
    return (
        "[contains(concat(' ', normalize-space(@class), ' '), "
        f"' {class_name} ')]"
    )


@lru_cache(maxsize=None)
def _expression(axis: str, tag: str, classes: tuple[str, ...]) -> str:
    predicates = "".join(_class_predicate(c) for c in classes)
    return f"{axis}::{tag}{predicates}"


def is_element(node) -> bool:
    # Comments and processing instructions have a callable as their tag.
    return isinstance(getattr(node, "tag", None), str)


def get_children(node: html.HtmlElement) -> list[html.HtmlElement]:
    """Direct element children of ``node``, in document order."""
    return [child for child in node if is_element(child)]


def select_all(
    node: html.HtmlElement, tag: str, *classes: str
) -> list[html.HtmlElement]:
    """Descendants of ``node`` named ``tag`` carrying every class in ``classes``."""
    return node.xpath(_expression("descendant", tag, classes))


def select_first(
    node: html.HtmlElement, tag: str, *classes: str
) -> Optional[html.HtmlElement]:
    hits = select_all(node, tag, *classes)
    return hits[0] if hits else None


def has_class(node: html.HtmlElement, class_name: str) -> bool:
    return class_name in (node.get("class") or "").split()


def immediate_text(node: html.HtmlElement) -> Optional[str]:
    """The text of ``node`` when its only child is a single text node.

    A tag wrapping nested markup yields ``None`` even if that markup
    renders as plain text.
    """
    if len(node) == 0 and node.text:
        return node.text
    return None


def text_of(node: html.HtmlElement) -> str:
    return node.text_content()


def inner_html(node: html.HtmlElement) -> str:
    parts = [html_escape.escape(node.text or "", quote=False)]
    for child in node:
        parts.append(etree.tostring(child, encoding="unicode", method="html"))
    return "".join(parts)


def content_root(doc: html.HtmlElement) -> Optional[html.HtmlElement]:
    """The element whose children are the article's top-level nodes."""
    hits = doc.xpath(
        _expression("descendant-or-self", "div", ("mw-parser-output",))
    )
    if hits:
        return hits[0]
    return doc.find("body")


def heading_node(node: html.HtmlElement) -> Optional[html.HtmlElement]:
    """The ``hN`` element behind ``node``.

    Newer MediaWiki output wraps each heading in ``div.mw-heading``; the
    wrapper is what appears among the top-level nodes.
    """
    if not is_element(node):
        return None
    if node.tag in HEADING_TAGS:
        return node
    if node.tag == "div" and has_class(node, "mw-heading"):
        for child in get_children(node):
            if child.tag in HEADING_TAGS:
                return child
    return None


def heading_level(node: html.HtmlElement) -> Optional[str]:
    heading = heading_node(node)
    return heading.tag if heading is not None else None


def heading_text(node: html.HtmlElement) -> Optional[str]:
    """Visible label of a heading, or ``None`` if ``node`` is not one."""
    heading = heading_node(node)
    if heading is None:
        return None
    headline = select_first(heading, "span", "mw-headline")
    if headline is not None:
        return immediate_text(headline)
    return immediate_text(heading)


def find_first_by_tag(
    nodes: Iterable[html.HtmlElement], tag: str
) -> Optional[html.HtmlElement]:
    for node in nodes:
        if is_element(node) and node.tag == tag:
            return node
    return None

