"""Ingester for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from docmark.models import Document, FileMetadata
from docmark.utils.text import decode_text, is_text_file

logger = logging.getLogger(__name__)

# Directory names never descended into
SKIP_DIRS = {
    "__pycache__",
    "node_modules",
    "venv",
    "env",
    "dist",
    "build",
}


class FolderIngester:
    """Ingester for every text file under a folder."""

    source_type = "folder"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield text documents from a folder recursively, in path order.

        Document ids are paths relative to ``source``.
        """
        for root, dirs, files in os.walk(source):
            dirs[:] = sorted(d for d in dirs if not self._should_skip(d))
            for filename in sorted(files):
                if self._should_skip(filename):
                    continue

                full_path = Path(root) / filename
                try:
                    raw_content = full_path.read_bytes()
                except OSError as e:
                    logger.warning(f"Skipping {full_path}: {e}")
                    continue

                rel_path = full_path.relative_to(source).as_posix()
                if not is_text_file(rel_path, raw_content):
                    logger.debug(f"Skipping binary file {rel_path}")
                    continue

                metadata = FileMetadata(
                    path=rel_path,
                    size_bytes=len(raw_content),
                    extension=full_path.suffix.lower(),
                    is_binary=False,
                )
                yield Document(
                    doc_id=rel_path,
                    text=decode_text(raw_content),
                    metadata=metadata,
                )

    def _should_skip(self, name: str) -> bool:
        """Skip hidden entries and common build/cache directories."""
        return name.startswith(".") or name in SKIP_DIRS or name.endswith(".egg-info")
