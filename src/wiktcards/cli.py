"""Command-line entry point: word lists in, records and flashcards out."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from wiktcards.audio import AudioCache
from wiktcards.config import DEFAULT_USER_AGENT, ExtractorConfig
from wiktcards.errors import WiktcardsError
from wiktcards.fetch import lookup_word
from wiktcards.flashcards import build_row, write_rows
from wiktcards.model import Word
from wiktcards.storage import write_jsonl
from wiktcards.wordlist import collect_words

logger = logging.getLogger("wiktcards")

_current = threading.local()


class WordFilter(logging.Filter):
    """Tag each record with the word the emitting thread is working on."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.word = getattr(_current, "word", "-")
        return True


def init_logging(level: int) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(WordFilter())
    handler.setFormatter(logging.Formatter("%(levelname)s:[%(word)s] %(message)s"))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wiktcards",
        description=(
            "Look up words on Wiktionary and write the extracted entries as "
            "JSON lines and/or a tab-separated flashcard import file."
        ),
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Word list files or glob patterns (tab-separated: word[, hint]).",
    )
    parser.add_argument("--json", type=Path, help="Path to the output JSONL file.")
    parser.add_argument("--csv", type=Path, help="Path to the flashcard TSV file.")
    parser.add_argument(
        "--audio-dir",
        type=Path,
        default=None,
        help="Download pronunciation audio into this directory.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=4,
        help="Number of words looked up concurrently (default: 4).",
    )
    parser.add_argument(
        "--language",
        default="French",
        help="Language section to extract (default: French).",
    )
    parser.add_argument(
        "--keep-markup",
        action="store_true",
        help="Keep inner HTML of example sentences instead of plain text.",
    )
    parser.add_argument(
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        help="User-Agent header to send with HTTP requests.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Timeout in seconds for HTTP requests (default: 30).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log debugging details."
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors."
    )
    return parser.parse_args(argv)


def _lookup(
    word: str, config: ExtractorConfig, audio: Optional[AudioCache]
) -> tuple[Optional[Word], Optional[str]]:
    _current.word = word
    try:
        try:
            record = lookup_word(word, config)
        except WiktcardsError as exc:
            logger.error("Lookup failed: %s", exc)
            return None, None
        if not record.meanings:
            logger.warning("No recognized part of speech")
        audio_filename = None
        if audio is not None and record.pronunciation is not None:
            try:
                audio_filename = audio.fetch(record.pronunciation.audio_url)
            except WiktcardsError as exc:
                logger.error("Audio download failed: %s", exc)
        return record, audio_filename
    finally:
        _current.word = "-"


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_arguments(argv)
    if args.verbose:
        init_logging(logging.DEBUG)
    elif args.quiet:
        init_logging(logging.WARNING)
    else:
        init_logging(logging.INFO)

    config = ExtractorConfig(
        language=args.language,
        user_agent=args.user_agent,
        timeout=args.timeout,
        keep_example_markup=args.keep_markup,
    )
    entries = collect_words(args.inputs)
    if not entries:
        logger.error("No words found in %s", ", ".join(args.inputs))
        return 1
    audio = AudioCache(args.audio_dir, config) if args.audio_dir else None

    with ThreadPoolExecutor(max_workers=max(1, args.workers)) as pool:
        results = list(
            pool.map(lambda entry: _lookup(entry[0], config, audio), entries)
        )

    found = [
        (record, hint, audio_filename)
        for (_, hint), (record, audio_filename) in zip(entries, results)
        if record is not None
    ]
    if args.json:
        write_jsonl(args.json, (record for record, _, _ in found))
    if args.csv:
        rows = (build_row(record, hint, filename) for record, hint, filename in found)
        write_rows(args.csv, rows)
    logger.info("Extracted %d of %d words", len(found), len(entries))
    return 0 if found else 1


if __name__ == "__main__":
    sys.exit(main())
