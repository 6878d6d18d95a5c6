"""Marked passages, highlight rules and report entries."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class MarkedSpan:
    """One delimited passage found by a scan."""

    raw_text: str  # including delimiters
    inner_text: str
    start: int
    end: int
    line_number: int


@dataclass(frozen=True)
class HighlightRule:
    """A rendering rule: paint the given groups of every pattern match."""

    pattern: re.Pattern
    style: str
    groups: tuple[int, ...] = (1, 2, 3)


@dataclass(frozen=True)
class ReportEntry:
    """Snapshot of a passage, pointing back at where it was found."""

    source_document_id: str
    source_offset: int
    line_number: int
    raw_text: str
