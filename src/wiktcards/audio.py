"""On-disk cache of pronunciation audio files."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlsplit

from wiktcards.config import ExtractorConfig
from wiktcards.errors import FetchError
from wiktcards.fetch import fetch_bytes

logger = logging.getLogger(__name__)


class AudioCache:
    """Downloads each audio file once into ``directory``.

    Safe to share between threads: downloads of the same file name are
    serialized, different file names proceed in parallel.
    """

    def __init__(self, directory: Path, config: Optional[ExtractorConfig] = None):
        self.directory = Path(directory)
        self.config = config or ExtractorConfig()
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @staticmethod
    def filename_for(url: str) -> str:
        name = unquote(urlsplit(url).path.rsplit("/", 1)[-1])
        if not name:
            raise ValueError(f"No file name in {url!r}")
        return name.replace(" ", "_")

    def _lock_for(self, filename: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(filename, threading.Lock())

    def fetch(self, url: str) -> str:
        """Make sure the file behind ``url`` is cached; return its name.

        Every failure, including a bad URL or a failed disk write, is
        raised as ``FetchError``.
        """
        try:
            filename = self.filename_for(url)
        except ValueError as exc:
            raise FetchError(str(exc)) from exc
        target = self.directory / filename
        with self._lock_for(filename):
            if target.exists():
                logger.debug("Audio %s already cached", filename)
                return filename
            data = fetch_bytes(url, self.config.user_agent, self.config.timeout)
            try:
                self._write(target, data)
            except OSError as exc:
                raise FetchError(f"Cannot save audio {filename}: {exc}") from exc
            logger.info("Saved audio %s (%d bytes)", filename, len(data))
        return filename

    def _write(self, target: Path, data: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".part")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, target)
        except BaseException:
            os.unlink(tmp_name)
            raise
