"""Exceptions raised by the fetch-validate-extract pipeline.

Only validation problems get their own types. Transport errors come straight
from `requests` and archive errors straight from `zipfile`.
"""

from __future__ import annotations


class FeedIngestError(Exception):
    """Base class for errors raised by feed_ingest itself."""


class InvalidURL(FeedIngestError, ValueError):
    """The input string is not an absolute URL with scheme and host."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class UnsupportedFormat(FeedIngestError, ValueError):
    """The URL is valid but its extension is not in any whitelist."""

    def __init__(self, url: str, extension: str, reason: str | None = None):
        self.url = url
        self.extension = extension
        super().__init__(
            reason or f"Unsupported format {extension or '<none>'!r} for {url!r}"
        )


class AmbiguousArchive(UnsupportedFormat):
    """Archive holds more than one member and the strict policy is active."""

    def __init__(self, url: str, members: list[str], extension: str = ".zip"):
        self.members = members
        super().__init__(
            url,
            extension,
            f"Archive {url!r} has {len(members)} members, expected exactly one",
        )


class EmptyArchive(UnsupportedFormat):
    """Archive has no file entries."""

    def __init__(self, url: str, extension: str = ".zip"):
        super().__init__(url, extension, f"Archive {url!r} has no file entries")
