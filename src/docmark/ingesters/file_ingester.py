"""Ingester for a single text file."""

import logging
from pathlib import Path
from typing import Iterator

from docmark.models import Document, FileMetadata
from docmark.utils.text import decode_text, is_text_file

logger = logging.getLogger(__name__)


class FileIngester:
    """Ingester for one file, addressed by its name."""

    source_type = "file"

    def can_handle(self, source: Path) -> bool:
        return source.is_file()

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield the file as a document, or nothing if it is binary or unreadable."""
        try:
            raw_content = source.read_bytes()
        except OSError as e:
            logger.warning(f"Skipping {source}: {e}")
            return

        if not is_text_file(source, raw_content):
            logger.debug(f"Skipping binary file {source}")
            return

        metadata = FileMetadata(
            path=str(source),
            size_bytes=len(raw_content),
            extension=source.suffix.lower(),
            is_binary=False,
        )
        yield Document(doc_id=source.name, text=decode_text(raw_content), metadata=metadata)
