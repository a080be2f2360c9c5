"""Handle for a file materialized in temporary storage.

The artifact is owned by whoever received it. Use it as a context manager
(or call `dispose()`) to remove the file when done.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional


class TransientArtifact:
    """Binary temporary file plus a little metadata about where it came from."""

    def __init__(
        self,
        path: str | Path,
        source_url: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.path = Path(path)
        self.source_url = source_url
        self.status_code = status_code
        self._disposed = False

    @classmethod
    def create(
        cls,
        source_url: str,
        suffix: str = "",
        prefix: str = "feed_ingest_",
        dir: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> "TransientArtifact":
        """Reserve a new empty temp file (name generated, `suffix` kept)."""
        fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=dir)
        os.close(fd)
        return cls(name, source_url, status_code=status_code)

    def __repr__(self) -> str:
        return (
            f"TransientArtifact(path={str(self.path)!r}, "
            f"source_url={self.source_url!r})"
        )

    def __enter__(self) -> "TransientArtifact":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    @property
    def disposed(self) -> bool:
        return self._disposed

    def open(self) -> BinaryIO:
        # sempre binário: nada de conversão de encoding
        return open(self.path, "rb")

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def dispose(self) -> None:
        if self._disposed:
            return
        self.path.unlink(missing_ok=True)
        self._disposed = True
