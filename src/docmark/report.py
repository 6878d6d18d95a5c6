"""Listings of every marked passage in a document."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from docmark.config import DocmarkConfig
from docmark.engines import SearchDispatcher, get_engine
from docmark.errors import NoEntryError
from docmark.models import ReportEntry, View
from docmark.passages import scan
from docmark.protocols import DocumentHost

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportLine:
    """One rendered line of a listing and the entry behind it."""

    text: str
    entry: Optional[ReportEntry] = None  # None for the header


@dataclass(frozen=True)
class Report:
    """A read-only, point-in-time listing of passages.

    Entries are snapshots: editing the source afterwards does not update
    them, and visiting a stale entry goes to the recorded offset anyway.
    """

    source_document_id: str
    lines: tuple[ReportLine, ...]
    config: DocmarkConfig

    @property
    def entries(self) -> list[ReportEntry]:
        return [line.entry for line in self.lines if line.entry is not None]

    def entry_at(self, line: int) -> ReportEntry:
        """Return the entry attached to listing line ``line`` (0-based).

        Raises:
            NoEntryError: If the line is the header or out of range
        """
        if not 0 <= line < len(self.lines):
            raise NoEntryError()
        entry = self.lines[line].entry
        if entry is None:
            raise NoEntryError()
        return entry

    def render(self) -> str:
        return "\n".join(line.text for line in self.lines)

    def to_dicts(self) -> list[dict]:
        """Entries as plain dicts (for JSON output)."""
        return [
            {
                "document": e.source_document_id,
                "offset": e.source_offset,
                "line": e.line_number,
                "text": e.raw_text,
            }
            for e in self.entries
        ]


def format_entry(entry: ReportEntry) -> str:
    """Render an entry as a single listing line."""
    text = " ".join(entry.raw_text.split())
    return f"{entry.line_number:>6} @{entry.source_offset:<8} {text}"


def format_header(doc_id: str, count: int, config: DocmarkConfig) -> str:
    noun = "passage" if count == 1 else "passages"
    marks = f"{config.delimiter_left}...{config.delimiter_right}"
    return f"{count} {noun} marked {marks} in {doc_id}:"


class ReportBuilder:
    """Builds listings and runs the listing actions (visit, search)."""

    def __init__(self, host: DocumentHost, dispatcher: SearchDispatcher):
        self.host = host
        self.dispatcher = dispatcher

    def entries(self, doc_id: str, pattern: re.Pattern) -> list[ReportEntry]:
        """Scan ``doc_id`` and snapshot each passage, in document order."""
        text = self.host.get_text(doc_id)
        return [
            ReportEntry(
                source_document_id=doc_id,
                source_offset=span.start,
                line_number=span.line_number,
                raw_text=span.raw_text,
            )
            for span in scan(text, pattern)
        ]

    def build(
        self, doc_id: str, config: DocmarkConfig, pattern: re.Pattern
    ) -> Optional[Report]:
        """Build a listing for ``doc_id``.

        Args:
            doc_id: Source document
            config: Delimiters in effect (kept with the report)
            pattern: Pattern compiled from ``config``

        Returns:
            The report, or None when the document has no passages
        """
        entries = self.entries(doc_id, pattern)
        if not entries:
            logger.debug("No passages in %s", doc_id)
            return None

        lines = [ReportLine(format_header(doc_id, len(entries), config))]
        lines.extend(ReportLine(format_entry(e), e) for e in entries)
        logger.debug("Built report for %s: %d entries", doc_id, len(entries))
        return Report(source_document_id=doc_id, lines=tuple(lines), config=config)

    def visit(self, report: Report, line: int) -> View:
        """Jump to the source of the entry on ``line``.

        Reuses a visible view on the source document when there is one
        (recentering it); otherwise opens a new view.

        Raises:
            NoEntryError: If the line carries no entry
        """
        entry = report.entry_at(line)
        view = self.host.find_visible_view(entry.source_document_id)
        if view is not None:
            self.host.set_cursor(view, entry.source_offset)
            self.host.recenter(view)
        else:
            view = self.host.open_view(entry.source_document_id)
            self.host.set_cursor(view, entry.source_offset)
        return view

    def search(self, report: Report, line: int) -> str:
        """Search the default engine for the entry on ``line``.

        Returns:
            The URL that was opened

        Raises:
            NoEntryError: If the line carries no entry
        """
        entry = report.entry_at(line)
        query = report.config.strip_delimiters(entry.raw_text)
        engine = get_engine(report.config.default_engine)
        return self.dispatcher.search(query, engine)
