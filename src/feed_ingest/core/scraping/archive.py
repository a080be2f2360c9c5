"""Extract the single data member from a downloaded zip archive.

Every file entry is written to its own temporary file, in the archive's
directory order, and only the last one is kept. Earlier entries and the
archive itself are removed before returning. With `policy="error"` an
archive holding more than one file raises `AmbiguousArchive` instead.

Directory entries are not members: they are skipped before choosing the
last entry, so an archive whose final entry is a directory still yields its
last file.
"""

from __future__ import annotations

import shutil
import zipfile
from pathlib import PurePosixPath
from typing import List, Optional

from feed_ingest.core.errors import AmbiguousArchive, EmptyArchive
from feed_ingest.core.scraping.artifact import TransientArtifact


def _file_entries(zf: zipfile.ZipFile) -> List[zipfile.ZipInfo]:
    return [info for info in zf.infolist() if not info.is_dir()]


def extract_member(
    archive: TransientArtifact,
    policy: str = "last",
    temp_dir: Optional[str] = None,
) -> TransientArtifact:
    """Return the extracted member of `archive` as a new artifact.

    `archive` is always disposed, whether extraction succeeds or not.
    """
    current: Optional[TransientArtifact] = None
    try:
        with zipfile.ZipFile(archive.path) as zf:
            entries = _file_entries(zf)
            if not entries:
                raise EmptyArchive(archive.source_url, archive.extension)
            if policy == "error" and len(entries) > 1:
                raise AmbiguousArchive(
                    archive.source_url,
                    [e.filename for e in entries],
                    archive.extension,
                )

            for info in entries:
                # o anterior é descartado: só o último membro fica
                if current is not None:
                    current.dispose()
                current = TransientArtifact.create(
                    archive.source_url,
                    suffix=PurePosixPath(info.filename).suffix,
                    prefix="unzipped_file_",
                    dir=temp_dir,
                    status_code=archive.status_code,
                )
                with zf.open(info) as src, open(current.path, "wb") as dst:
                    shutil.copyfileobj(src, dst)
    except BaseException:
        if current is not None:
            current.dispose()
        raise
    finally:
        archive.dispose()

    return current
