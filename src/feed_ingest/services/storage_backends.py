from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Type

from feed_ingest.core.scraping.artifact import TransientArtifact


class ArtifactStorage(ABC):
    """Abstract storage backend interface."""

    @abstractmethod
    def save(
        self, artifact: TransientArtifact, bucket: str, path: str, filename: str
    ) -> str:
        """Copy the artifact bytes and return the stored location."""
        raise NotImplementedError()


class LocalStorage(ArtifactStorage):
    """Save artifacts locally under `<bucket>/<path>/<filename>`."""

    def save(
        self, artifact: TransientArtifact, bucket: str, path: str, filename: str
    ) -> str:
        out_dir = Path(bucket) / path
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file = out_dir / filename
        shutil.copyfile(artifact.path, out_file)
        return str(out_file)


class GCSStorage(ArtifactStorage):
    """GCS-backed storage implementation (requires google-cloud-storage)."""

    def __init__(self, project: str | None = None):
        try:
            from google.cloud import storage
        except Exception as exc:  # pragma: no cover - requires external lib
            raise RuntimeError(
                "google-cloud-storage is required to upload to GCS. "
                "Install it with `pip install google-cloud-storage`"
            ) from exc
        self.client = storage.Client(project=project)

    def save(
        self, artifact: TransientArtifact, bucket: str, path: str, filename: str
    ) -> str:
        blob_name = f"{path.strip('/')}/{filename}"
        blob = self.client.bucket(bucket).blob(blob_name)
        blob.upload_from_filename(str(artifact.path))
        return f"gs://{bucket}/{blob_name}"


_BACKENDS: Dict[str, Type[ArtifactStorage]] = {
    "local": LocalStorage,
    "gcs": GCSStorage,
}


def get_storage(kind: str) -> ArtifactStorage:
    backend = _BACKENDS.get(kind)
    if not backend:
        raise ValueError(f"Storage '{kind}' não registrado.")
    return backend()
