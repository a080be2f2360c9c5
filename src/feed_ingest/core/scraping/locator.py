"""Parsed, immutable view of a resource URL.

`ResourceLocator` never raises on construction: malformed input simply
reports `is_absolute == False` so the caller decides what to do with it.
"""

from __future__ import annotations

from functools import cached_property
from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import SplitResult, urlsplit


class ResourceLocator:
    """URL string plus the attributes derived from it (computed once)."""

    def __init__(self, url: str):
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"ResourceLocator({self._url!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceLocator):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    @cached_property
    def _parts(self) -> Optional[SplitResult]:
        # urlsplit descarta TAB/CR/LF em silêncio: a URL validada tem que ser
        # a mesma que vai no GET, então espaço e controle invalidam a URL
        if any(c.isspace() or ord(c) < 32 or ord(c) == 127 for c in self._url):
            return None
        try:
            parts = urlsplit(self._url)
            # .port validates the port number and raises ValueError if bad
            parts.port
        except (ValueError, AttributeError):
            return None
        return parts

    @cached_property
    def is_absolute(self) -> bool:
        p = self._parts
        return bool(p and p.scheme and p.hostname)

    @cached_property
    def scheme(self) -> str:
        return self._parts.scheme.lower() if self._parts else ""

    @cached_property
    def host(self) -> str:
        return (self._parts.hostname or "") if self._parts else ""

    @cached_property
    def port(self) -> Optional[int]:
        if not self._parts:
            return None
        if self._parts.port is not None:
            return self._parts.port
        return {"http": 80, "https": 443}.get(self.scheme)

    @cached_property
    def path(self) -> str:
        return self._parts.path if self._parts else ""

    @cached_property
    def query(self) -> str:
        return self._parts.query if self._parts else ""

    @cached_property
    def request_target(self) -> str:
        """Path plus query, as sent on the request line."""
        target = self.path or "/"
        if self.query:
            target = f"{target}?{self.query}"
        return target

    @cached_property
    def extension(self) -> str:
        # sufixo do último segmento do caminho ("b.c.zip" -> ".zip", "b" -> "")
        return PurePosixPath(self.path).suffix.lower()
