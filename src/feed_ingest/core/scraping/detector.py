"""Classify a resource by the extension of its URL.

Provides the FormatClass enum and `detect_format` helper. The decision uses
only the URL extension against the configured whitelists (no content
sniffing, no Content-Type header).
"""

from __future__ import annotations

# Enum: lista de valores fixos, tipo um menu.
from enum import Enum

from feed_ingest.core.config import FetcherConfig
from feed_ingest.core.scraping.locator import ResourceLocator


# Os três resultados possíveis da classificação.
class FormatClass(str, Enum):
    DIRECTLY_READABLE = "directly_readable"
    ARCHIVED = "archived"
    UNSUPPORTED = "unsupported"


def classify_extension(extension: str, config: FetcherConfig) -> FormatClass:
    ext = (extension or "").lower()
    if ext in config.readable_extensions:
        return FormatClass.DIRECTLY_READABLE
    if ext in config.archive_extensions:
        return FormatClass.ARCHIVED
    # extensão vazia ou fora das whitelists
    return FormatClass.UNSUPPORTED


def detect_format(locator: ResourceLocator, config: FetcherConfig) -> FormatClass:
    """Detect the format class of `locator` from its extension."""
    return classify_extension(locator.extension, config)
