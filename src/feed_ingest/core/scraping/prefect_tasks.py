"""Tarefas Prefect que usam os componentes de ingestão.

Este arquivo adapta as peças "baixas" (catálogo, fetcher, storage) para o
modelo de execução do Prefect. Cada task é uma unidade de trabalho com logs
e, quando faz sentido, tentativas (retries).

Observação: o download de um feed (`fetch_resource`) NÃO tem retries. Um
erro de rede sobe para o flow, que registra e segue para a próxima URL.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import List, Optional

from prefect import get_run_logger, task

from feed_ingest.catalogs import get_catalog_for_url
from feed_ingest.core.config import CatalogConfig, FetcherConfig
from feed_ingest.core.scraping.artifact import TransientArtifact
from feed_ingest.core.scraping.locator import ResourceLocator
from feed_ingest.core.scraping.resource_fetcher import ResourceFetcher
from feed_ingest.services.storage_backends import get_storage


def artifact_filename(artifact: TransientArtifact) -> str:
    """Name used when persisting: URL stem + the artifact's own extension.

    `http://x/posts/1463378093216.zip` holding `data.xml` -> `1463378093216.xml`
    """
    stem = PurePosixPath(ResourceLocator(artifact.source_url).path).stem
    return f"{stem or 'resource'}{artifact.extension}"


@task(name="fetch_listing", retries=2, retry_delay_seconds=3)
def fetch_listing_task(catalog_config: CatalogConfig) -> str:
    logger = get_run_logger()
    Catalog = get_catalog_for_url(catalog_config.base_url)
    catalog = Catalog(catalog_config)
    logger.info("Fetching listing: %s", catalog.listing_url())
    return catalog.fetch_listing()


@task(name="list_catalog_urls", retries=0)
def list_catalog_urls_task(
    html: str, catalog_config: CatalogConfig, max_urls: Optional[int] = None
) -> List[str]:
    logger = get_run_logger()
    Catalog = get_catalog_for_url(catalog_config.base_url)
    urls = Catalog(catalog_config).build_urls(html)
    logger.info("Found %d urls on %s", len(urls), catalog_config.base_url)
    if max_urls:
        urls = urls[:max_urls]
    return urls


@task(name="fetch_resource", retries=0, refresh_cache=True)
def fetch_resource_task(url: str, fetcher_config: FetcherConfig) -> TransientArtifact:
    logger = get_run_logger()
    logger.info("Fetching resource: %s", url)
    artifact = ResourceFetcher(fetcher_config).process(url)
    logger.info(
        "Fetched %s -> %s (status=%s, size=%d bytes)",
        url,
        artifact.path,
        artifact.status_code,
        artifact.size,
    )
    return artifact


@task(name="store_artifact", retries=3, retry_delay_seconds=5, refresh_cache=True)
def store_artifact_task(
    artifact: TransientArtifact, *, storage: str, bucket: str, path: str
) -> str:
    """Persist the artifact and release the temporary file afterwards."""
    logger = get_run_logger()
    backend = get_storage(storage)
    stored = backend.save(artifact, bucket, path, artifact_filename(artifact))
    logger.info("Stored %s at %s", artifact.source_url, stored)
    artifact.dispose()
    return stored
