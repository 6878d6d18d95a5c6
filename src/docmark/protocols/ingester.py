"""Protocol for document sources."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from docmark.models import Document


@runtime_checkable
class Ingester(Protocol):
    """Protocol for document sources.

    Implementations turn a path (a single file, a folder) into documents.
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'file', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield text documents from the source. Binary files are skipped."""
        ...
