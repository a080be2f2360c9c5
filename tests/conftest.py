import io
import zipfile

import pytest
import requests


class DummyResponse:
    """Minimal stand-in for a streamed `requests.Response`."""

    def __init__(self, body: bytes = b"", status_code: int = 200, text: str = ""):
        self.body = body
        self.status_code = status_code
        self.text = text
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class DummyFetcher:
    """Serves canned responses by URL and records every request."""

    def __init__(self, routes: dict | None = None):
        self.routes = routes or {}
        self.calls: list[str] = []

    def _lookup(self, url: str) -> DummyResponse:
        self.calls.append(url)
        route = self.routes[url]
        if isinstance(route, Exception):
            raise route
        if isinstance(route, DummyResponse):
            return route
        return DummyResponse(route)

    def stream_get(self, url: str, **kwargs):
        return self._lookup(url)

    def get(self, url: str, **kwargs):
        return self._lookup(url)


def build_zip(entries) -> bytes:
    """Return zip bytes holding `entries` ((name, data) pairs) in that order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return buf.getvalue()


@pytest.fixture
def dummy_fetcher():
    return DummyFetcher()


@pytest.fixture
def temp_dir(tmp_path):
    d = tmp_path / "transient"
    d.mkdir()
    return d


def mark_encrypted(data: bytes) -> bytes:
    """Set the 'encrypted' flag bit on every entry of a zip built in memory."""
    buf = bytearray(data)
    for signature, flag_offset in ((b"PK\x03\x04", 6), (b"PK\x01\x02", 8)):
        pos = buf.find(signature)
        while pos != -1:
            buf[pos + flag_offset] |= 0x01
            pos = buf.find(signature, pos + 4)
    return bytes(buf)
