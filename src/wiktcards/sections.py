"""Structural segmentation of an article by heading level."""

from __future__ import annotations

from typing import Optional, Sequence

from lxml import html

from wiktcards.tree import heading_level, heading_text

Section = Sequence[html.HtmlElement]


def _heading_positions(nodes: Section, levels: Sequence[str]) -> list[int]:
    return [idx for idx, node in enumerate(nodes) if heading_level(node) in levels]


def select_language_region(
    nodes: Section, language_label: str, level: str = "h2"
) -> Optional[Section]:
    """Nodes from the ``language_label`` heading up to the next heading
    at the same level, or to the end of the document.

    Returns ``None`` when no heading at ``level`` carries that label.
    """
    splitters = _heading_positions(nodes, (level,))
    for position, start in enumerate(splitters):
        if heading_text(nodes[start]) != language_label:
            continue
        if position < len(splitters) - 1:
            return nodes[start : splitters[position + 1]]
        return nodes[start:]
    return None


def split_into_subsections(
    region: Section, levels: Sequence[str] = ("h3", "h4")
) -> list[Section]:
    """One node range per pair of consecutive sub-headings.

    Each range starts with its heading.  Material before the first and
    after the last sub-heading is not part of any range, so a region
    with fewer than two sub-headings yields nothing.
    """
    splitters = _heading_positions(region, levels)
    return [region[start:end] for start, end in zip(splitters, splitters[1:])]
