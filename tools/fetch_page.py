#!/usr/bin/env python3
"""Fetch a single Wiktionary page from the live site and extract it.

With ``--save-html`` the raw page is kept, which is how the fixtures in
``tests/data`` are produced.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from wiktcards.config import DEFAULT_USER_AGENT, ExtractorConfig
from wiktcards.entry_parser import extract_word
from wiktcards.errors import WiktcardsError
from wiktcards.fetch import fetch_page
from wiktcards.storage import word_to_dict


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download a Wiktionary page and print the extracted entry."
    )
    parser.add_argument("title", help="Title of the Wiktionary page to extract")
    parser.add_argument(
        "--language",
        default="French",
        help="Language section to extract (default: French).",
    )
    parser.add_argument(
        "--html",
        default=None,
        help="Parse this local HTML file instead of fetching the page.",
    )
    parser.add_argument(
        "--save-html",
        default=None,
        help="Also write the fetched HTML to this path.",
    )
    parser.add_argument(
        "--keep-markup",
        action="store_true",
        help="Keep inner HTML of example sentences.",
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
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log which subsections were skipped and why.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_arguments()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )
    config = ExtractorConfig(
        language=args.language,
        user_agent=args.user_agent,
        timeout=args.timeout,
        keep_example_markup=args.keep_markup,
    )

    try:
        if args.html:
            html_text = Path(args.html).read_text(encoding="utf-8")
        else:
            html_text = fetch_page(args.title, config)
        if args.save_html:
            out = Path(args.save_html)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(html_text, encoding="utf-8")
        word = extract_word(html_text, args.title, config)
    except WiktcardsError as exc:
        sys.stderr.write(f"{args.title}: {exc}\n")
        sys.exit(1)

    json.dump(word_to_dict(word), sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
