"""Data models for docmark."""

from docmark.models.document import Document, FileMetadata, View
from docmark.models.passage import HighlightRule, MarkedSpan, ReportEntry

__all__ = [
    "Document",
    "FileMetadata",
    "View",
    "MarkedSpan",
    "HighlightRule",
    "ReportEntry",
]
