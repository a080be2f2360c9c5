"""HTTP fetcher built on a `requests.Session`.

Provides a small `Fetcher` object exposing `get` and `stream_get`. Feed
downloads do not retry and do not follow redirects, so both default off.
"""

from __future__ import annotations

import random
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_UA_POOL = [
    "Mozilla/5.0 (compatible; FeedIngestBot/1.0; +https://example.org/bot)",
]


class Fetcher:
    """Small HTTP client shared by the downloader and the URL catalog.

    Usage:
        f = Fetcher(timeout=15)
        resp = f.get(url)
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        retries: int = 0,
        backoff_factor: float = 0.0,
        follow_redirects: bool = False,
        ua_pool: Optional[list[str]] = None,
    ) -> None:
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.session = requests.Session()
        retry = Retry(
            total=retries,
            redirect=False,
            raise_on_status=False,
            allowed_methods=frozenset(["GET"]),
            backoff_factor=backoff_factor,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.ua_pool = ua_pool or DEFAULT_UA_POOL

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": random.choice(self.ua_pool)}
        if headers:
            base.update(headers)
        return base

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        kwargs.setdefault("allow_redirects", self.follow_redirects)
        return self.session.get(
            url, headers=self._headers(headers), timeout=self.timeout, **kwargs
        )

    def stream_get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        # Streamed GET: o corpo é lido em pedaços pelo chamador
        kwargs.setdefault("allow_redirects", self.follow_redirects)
        return self.session.get(
            url,
            headers=self._headers(headers),
            timeout=self.timeout,
            stream=True,
            **kwargs,
        )

    def close(self) -> None:
        self.session.close()
