"""
Fluxo de ingestão de feeds (explicado para leigos)

Este arquivo define um "flow" do Prefect que coordena a ingestão de feeds
publicados como arquivos `.xml` ou `.zip` numa página de listagem.

Visão geral do que o fluxo faz:

1. Valida a configuração do job (nome, catálogo, destino, etc.).
2. Busca a página de listagem e monta a lista de URLs (base + fragmento).
3. Para cada URL, na ordem da página, uma de cada vez:
   - valida a URL e o formato (URLs inválidas são registradas e puladas);
   - baixa para um arquivo temporário e, se for `.zip`, extrai o membro;
   - guarda o resultado no storage configurado (local ou GCS);
   - apaga o arquivo temporário.
4. Devolve a lista dos locais onde os arquivos foram guardados.
"""

from __future__ import annotations

from typing import List

from prefect import flow, get_run_logger

from feed_ingest.core.config import IngestJobConfig
from feed_ingest.core.errors import FeedIngestError
from feed_ingest.core.scraping.prefect_tasks import (
    fetch_listing_task,
    fetch_resource_task,
    list_catalog_urls_task,
    store_artifact_task,
)


@flow(name="Feed Ingestion", log_prints=True)
def feed_ingest_flow(config_dict: dict) -> List[str]:
    """Catalog -> fetch -> store, one URL at a time.

    config_dict: must conform to `IngestJobConfig`.
    """
    logger = get_run_logger()
    try:
        config = IngestJobConfig(**config_dict)
        logger.info("Config valid for job: %s", config.job_name)
    except Exception as e:
        logger.error("Invalid config: %s", e)
        raise

    html = fetch_listing_task(config.catalog)
    urls = list_catalog_urls_task(html, config.catalog, config.max_urls)

    stored: List[str] = []
    skipped = 0
    for url in urls:
        try:
            artifact = fetch_resource_task(url, config.fetcher)
        except FeedIngestError as exc:
            # URL inválida ou formato fora da whitelist: segue para a próxima
            logger.error("Skipping %s: %s", url, exc)
            skipped += 1
            continue
        except Exception as exc:
            # rede, zip corrompido, membro criptografado, compressão sem suporte...
            logger.error("Download/extraction failed for %s: %s", url, exc)
            skipped += 1
            continue

        try:
            location = store_artifact_task(
                artifact,
                storage=config.storage,
                bucket=config.destination_bucket,
                path=config.raw_path,
            )
        finally:
            artifact.dispose()
        stored.append(location)

    logger.info(
        "Job %s completed. %d stored, %d skipped.",
        config.job_name,
        len(stored),
        skipped,
    )
    return stored


if __name__ == "__main__":
    payload = {
        "job_name": "omgili_mainstream_posts",
        "environment": "dev",
        "catalog": {
            "base_url": "http://feed.omgili.com/5Rh5AMTrc4Pv/mainstream/posts/",
        },
        "max_urls": 1,
        "destination_bucket": "data",
        "destination_path": "datalake",
    }
    feed_ingest_flow(payload)
