"""Data models for source documents and the views onto them."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FileMetadata:
    """Metadata for a file considered during ingestion."""

    path: str
    size_bytes: int
    extension: str
    is_binary: bool


@dataclass
class Document:
    """A text document held by the host."""

    doc_id: str
    text: str
    metadata: Optional[FileMetadata] = None  # None for in-memory documents


@dataclass
class View:
    """A window onto one document, with its own cursor."""

    view_id: int
    doc_id: str
    cursor: int = 0
    top_line: int = 0
    height: int = 24
    visible: bool = True
