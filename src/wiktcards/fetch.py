"""Download pages from the live wiki."""

from __future__ import annotations

import http.client
import logging
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from wiktcards.config import ExtractorConfig
from wiktcards.entry_parser import extract_word
from wiktcards.errors import FetchError
from wiktcards.model import Word

logger = logging.getLogger(__name__)


def fetch_bytes(url: str, user_agent: str, timeout: float) -> bytes:
    request = Request(url, headers={"User-Agent": user_agent})
    try:
        with urlopen(request, timeout=timeout) as response:
            return response.read()
    except HTTPError as exc:
        raise FetchError(
            f"HTTP error {exc.code} when fetching {url}: {exc.reason}"
        ) from exc
    except URLError as exc:
        raise FetchError(f"Failed to fetch {url}: {exc.reason}") from exc
    except (OSError, http.client.HTTPException) as exc:
        raise FetchError(f"Failed to read {url}: {exc!r}") from exc


def fetch_page(word: str, config: Optional[ExtractorConfig] = None) -> str:
    """Raw HTML of the page for ``word``.  A single attempt; no retries."""
    if config is None:
        config = ExtractorConfig()
    url = config.page_url(word)
    logger.debug("GET %s", url)
    body = fetch_bytes(url, config.user_agent, config.timeout)
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FetchError(f"Response from {url} is not UTF-8: {exc}") from exc


def lookup_word(word: str, config: Optional[ExtractorConfig] = None) -> Word:
    if config is None:
        config = ExtractorConfig()
    return extract_word(fetch_page(word, config), word, config)
