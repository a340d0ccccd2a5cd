import threading
import time

import pytest

from wiktcards import audio as audio_module
from wiktcards.audio import AudioCache
from wiktcards.errors import FetchError

URL = "https://upload.wikimedia.org/wikipedia/commons/a/a1/LL-Q150%20(fra)-chat.wav"


def test_filename_for():
    assert AudioCache.filename_for(URL) == "LL-Q150_(fra)-chat.wav"
    with pytest.raises(ValueError):
        AudioCache.filename_for("https://example.org/")


def test_downloads_once(tmp_path, monkeypatch):
    calls = []

    def fake_fetch(url, user_agent, timeout):
        calls.append(url)
        return b"RIFF"

    monkeypatch.setattr(audio_module, "fetch_bytes", fake_fetch)
    cache = AudioCache(tmp_path / "media")
    assert cache.fetch(URL) == "LL-Q150_(fra)-chat.wav"
    assert cache.fetch(URL) == "LL-Q150_(fra)-chat.wav"
    assert calls == [URL]
    assert (tmp_path / "media" / "LL-Q150_(fra)-chat.wav").read_bytes() == b"RIFF"
    assert not list((tmp_path / "media").glob("*.part"))


def test_concurrent_fetches_of_one_file_download_once(tmp_path, monkeypatch):
    calls = []

    def slow_fetch(url, user_agent, timeout):
        calls.append(url)
        time.sleep(0.05)
        return b"data"

    monkeypatch.setattr(audio_module, "fetch_bytes", slow_fetch)
    cache = AudioCache(tmp_path)
    threads = [threading.Thread(target=cache.fetch, args=(URL,)) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert calls == [URL]


def test_failed_download_leaves_nothing(tmp_path, monkeypatch):
    def failing_fetch(url, user_agent, timeout):
        raise FetchError("boom")

    monkeypatch.setattr(audio_module, "fetch_bytes", failing_fetch)
    cache = AudioCache(tmp_path)
    with pytest.raises(FetchError):
        cache.fetch(URL)
    assert list(tmp_path.iterdir()) == []


def test_url_without_file_name_is_a_fetch_error(tmp_path):
    with pytest.raises(FetchError, match="No file name"):
        AudioCache(tmp_path).fetch("https://example.org/")


def test_disk_write_failure_is_a_fetch_error(tmp_path, monkeypatch):
    monkeypatch.setattr(audio_module, "fetch_bytes", lambda *args: b"data")
    blocker = tmp_path / "media"
    blocker.write_text("not a directory", encoding="utf-8")
    cache = AudioCache(blocker)
    with pytest.raises(FetchError, match="Cannot save audio") as info:
        cache.fetch(URL)
    assert isinstance(info.value.__cause__, OSError)
