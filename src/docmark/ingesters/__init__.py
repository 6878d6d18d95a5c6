"""Document sources (ingesters) for docmark."""

from pathlib import Path
from typing import Optional

from docmark.ingesters.file_ingester import FileIngester
from docmark.ingesters.folder_ingester import FolderIngester
from docmark.models import Document
from docmark.protocols import Ingester

# Registry of available ingesters
_INGESTERS: list[Ingester] = [
    FileIngester(),
    FolderIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to a text file or a folder

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


def load_documents(source: Path | str) -> Optional[list[Document]]:
    """Read every text document from ``source``.

    Returns:
        The documents, or None if no ingester handles the source
    """
    ingester = get_ingester(source)
    if ingester is None:
        return None
    return list(ingester.ingest(Path(source)))


def register_ingester(ingester: Ingester) -> None:
    """Register a custom ingester (for plugins/extensions).

    Args:
        ingester: An object implementing the Ingester protocol
    """
    _INGESTERS.append(ingester)


__all__ = [
    "get_ingester",
    "load_documents",
    "register_ingester",
    "FileIngester",
    "FolderIngester",
]
