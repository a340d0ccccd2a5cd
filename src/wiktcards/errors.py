"""Exception types raised while looking up and extracting entries."""

from __future__ import annotations


class WiktcardsError(Exception):
    """Base class for every error raised by this package."""


class ExtractionError(WiktcardsError):
    """The document could not be turned into the requested record."""


class NotFoundError(ExtractionError):
    """A structure the extraction depends on is absent.

    Raised when the language region is missing from the page, when a
    recognized part-of-speech subsection carries no ordered list, or when
    an "Adjective" subsection has no paragraph to read forms from.
    """


class MalformedError(ExtractionError):
    """A node was found but does not have the expected shape."""


class AmbiguousMeaningError(WiktcardsError):
    """More than one meaning matches a caller-supplied hint."""

    def __init__(self, hint: str, candidates: list[str]):
        self.hint = hint
        self.candidates = candidates
        listed = "; ".join(repr(c) for c in candidates)
        super().__init__(f"{len(candidates)} meanings match {hint!r}: {listed}")


class FetchError(WiktcardsError):
    """Downloading a page or an audio file failed."""
