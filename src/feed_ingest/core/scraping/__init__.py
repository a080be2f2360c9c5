"""Core primitives exported for reuse across catalogs and flows.

This package contains small building blocks: Fetcher, ResourceLocator,
format detection, Downloader, archive extraction and the ResourceFetcher
that ties them together. Prefect task wrappers live in `prefect_tasks` and
are imported from there directly.
"""

from .archive import extract_member
from .artifact import TransientArtifact
from .detector import FormatClass, classify_extension, detect_format
from .downloader import Downloader
from .fetcher import Fetcher
from .locator import ResourceLocator
from .parser import extract_link_texts
from .resource_fetcher import Outcome, ProcessResult, ResourceFetcher, Verification

__all__ = [
    "Fetcher",
    "ResourceLocator",
    "FormatClass",
    "classify_extension",
    "detect_format",
    "TransientArtifact",
    "Downloader",
    "extract_member",
    "extract_link_texts",
    "ResourceFetcher",
    "Outcome",
    "ProcessResult",
    "Verification",
]
