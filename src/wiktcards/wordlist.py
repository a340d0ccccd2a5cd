"""Reading the words to look up from tab-separated lists."""

from __future__ import annotations

import csv
import glob
from pathlib import Path
from typing import Iterable, Optional


def read_word_list(path: Path) -> list[tuple[str, Optional[str]]]:
    """``(word, hint)`` pairs from a tab-separated file.

    Each row holds a word and optionally a hint used to pick one meaning.
    Empty cells are ignored and lines starting with ``#`` are comments.
    """
    entries: list[tuple[str, Optional[str]]] = []
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        for lineno, record in enumerate(csv.reader(f, delimiter="\t"), start=1):
            cells = [cell.strip() for cell in record if cell.strip()]
            if not cells or cells[0].startswith("#"):
                continue
            if len(cells) == 1:
                entries.append((cells[0], None))
            elif len(cells) == 2:
                entries.append((cells[0], cells[1]))
            else:
                raise ValueError(
                    f"{path}:{lineno}: expected a word and an optional hint, "
                    f"got {len(cells)} fields"
                )
    return entries


def expand_inputs(patterns: Iterable[str]) -> list[Path]:
    paths: list[Path] = []
    seen = set()
    for pattern in patterns:
        if any(char in pattern for char in "*?["):
            matches = sorted(glob.glob(pattern, recursive=True))
        else:
            matches = [pattern]
        for match in matches:
            path = Path(match)
            if path not in seen:
                seen.add(path)
                paths.append(path)
    return paths


def collect_words(patterns: Iterable[str]) -> list[tuple[str, Optional[str]]]:
    """Every word from every matching file, first occurrence wins."""
    entries: list[tuple[str, Optional[str]]] = []
    seen = set()
    for path in expand_inputs(patterns):
        for word, hint in read_word_list(path):
            if word in seen:
                continue
            seen.add(word)
            entries.append((word, hint))
    return entries
