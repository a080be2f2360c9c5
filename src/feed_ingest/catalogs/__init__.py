"""Registry and helper to select a catalog class by domain.

Simplest form: map known domains to a catalog class. Falls back to
`UrlCatalog`, which reads every `td a` anchor of the listing page.
"""

from typing import Dict, Type
from urllib.parse import urlparse

from .url_catalog import CatalogListing, UrlCatalog

_REGISTRY: Dict[str, Type[UrlCatalog]] = {
    "feed.omgili.com": UrlCatalog,
}


def register_catalog(domain: str, catalog_class: Type[UrlCatalog]) -> None:
    _REGISTRY[domain.lower()] = catalog_class


def get_catalog_for_url(url: str) -> Type[UrlCatalog]:
    domain = urlparse(url).netloc.lower()
    # match exact domain first, else try suffix
    if domain in _REGISTRY:
        return _REGISTRY[domain]
    for key in _REGISTRY:
        if domain.endswith("." + key):
            return _REGISTRY[key]
    return UrlCatalog


__all__ = [
    "get_catalog_for_url",
    "register_catalog",
    "UrlCatalog",
    "CatalogListing",
]
