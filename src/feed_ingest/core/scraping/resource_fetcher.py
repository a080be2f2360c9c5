"""Fetch one feed resource: validate, download, classify, extract.

Usage:
    fetcher = ResourceFetcher()
    with fetcher.process("http://feed.example.org/posts/123.zip") as artifact:
        data = artifact.read_bytes()

`process` raises `InvalidURL` / `UnsupportedFormat` before any network I/O.
`try_process` returns a `ProcessResult` instead, for callers that prefer to
branch on `result.kind` rather than catch exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from feed_ingest.core.config import FetcherConfig
from feed_ingest.core.errors import InvalidURL, UnsupportedFormat
from feed_ingest.core.scraping.archive import extract_member
from feed_ingest.core.scraping.artifact import TransientArtifact
from feed_ingest.core.scraping.detector import FormatClass, detect_format
from feed_ingest.core.scraping.downloader import Downloader
from feed_ingest.core.scraping.locator import ResourceLocator


class Outcome(str, Enum):
    OK = "ok"
    INVALID_URL = "invalid_url"
    UNSUPPORTED_FORMAT = "unsupported_format"


@dataclass(frozen=True)
class Verification:
    kind: Outcome
    locator: ResourceLocator
    format_class: Optional[FormatClass] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is Outcome.OK


@dataclass(frozen=True)
class ProcessResult:
    kind: Outcome
    url: str
    artifact: Optional[TransientArtifact] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is Outcome.OK


class ResourceFetcher:
    """Orchestrates validate -> download -> classify -> passthrough | extract."""

    def __init__(
        self,
        config: Optional[FetcherConfig] = None,
        downloader: Optional[Downloader] = None,
    ) -> None:
        self.config = config or FetcherConfig()
        self.downloader = downloader or Downloader(config=self.config)

    def check(self, url: str) -> Verification:
        """Validate `url` without raising. URL syntax is checked before format."""
        locator = ResourceLocator(url)
        if not locator.is_absolute:
            return Verification(
                Outcome.INVALID_URL, locator, reason=str(InvalidURL(url))
            )
        fmt = detect_format(locator, self.config)
        if fmt is FormatClass.UNSUPPORTED:
            return Verification(
                Outcome.UNSUPPORTED_FORMAT,
                locator,
                fmt,
                reason=str(UnsupportedFormat(url, locator.extension)),
            )
        return Verification(Outcome.OK, locator, fmt)

    def verify(self, url: str) -> ResourceLocator:
        """Same as `check` but raises on failure and returns the locator."""
        v = self.check(url)
        if v.kind is Outcome.INVALID_URL:
            raise InvalidURL(url)
        if v.kind is Outcome.UNSUPPORTED_FORMAT:
            raise UnsupportedFormat(url, v.locator.extension)
        return v.locator

    def process(self, url: str) -> TransientArtifact:
        locator = self.verify(url)
        downloaded = self.downloader.download(locator)
        if detect_format(locator, self.config) is FormatClass.DIRECTLY_READABLE:
            return downloaded
        return extract_member(
            downloaded,
            policy=self.config.multi_member_policy,
            temp_dir=self.config.temp_dir,
        )

    def try_process(self, url: str) -> ProcessResult:
        """Like `process`, but validation failures come back as a result.

        Transport and archive errors still propagate.
        """
        v = self.check(url)
        if not v.ok:
            return ProcessResult(v.kind, url, reason=v.reason)
        try:
            artifact = self.process(url)
        except UnsupportedFormat as exc:
            # arquivo vazio ou com vários membros (política "error")
            return ProcessResult(Outcome.UNSUPPORTED_FORMAT, url, reason=str(exc))
        return ProcessResult(Outcome.OK, url, artifact=artifact)
