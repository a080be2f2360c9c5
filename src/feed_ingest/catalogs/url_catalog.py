"""Catalog of feed URLs discovered on a listing page.

The listing page is a plain directory-style table. Each anchor text is a
path fragment (e.g. `1463378093216.zip`) and the resource URL is simply
`base_url + fragment`.
"""

from __future__ import annotations

from typing import Callable, Iterator, List

from feed_ingest.core.config import CatalogConfig
from feed_ingest.core.interfaces import BaseCatalog
from feed_ingest.core.scraping.fetcher import Fetcher
from feed_ingest.core.scraping.parser import extract_link_texts


class CatalogListing:
    """Lazy, restartable sequence of URLs.

    Nothing is fetched until iteration starts, and every new iteration
    fetches the listing page again.
    """

    def __init__(self, load: Callable[[], List[str]]):
        self._load = load

    def __iter__(self) -> Iterator[str]:
        yield from self._load()


class UrlCatalog(BaseCatalog):
    """Builds resource URLs from the anchors of a listing page."""

    def __init__(self, config: CatalogConfig, fetcher: Fetcher | None = None):
        self.config = config
        self.fetcher = fetcher or Fetcher(timeout=config.timeout)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def listing_url(self) -> str:
        path = self.config.listing_path.lstrip("/")
        return self.base_url.rstrip("/") + "/" + path

    def fetch_listing(self) -> str:
        resp = self.fetcher.get(self.listing_url())
        resp.raise_for_status()
        return resp.text

    def fragments(self, html: str) -> List[str]:
        return extract_link_texts(html, self.config.link_selector)

    def build_urls(self, html: str) -> List[str]:
        # concatenação simples, sem urljoin: a base já termina como o site espera
        return [self.base_url + fragment for fragment in self.fragments(html)]

    def _load(self) -> List[str]:
        return self.build_urls(self.fetch_listing())

    def list_urls(self) -> CatalogListing:
        return CatalogListing(self._load)
