"""Find every marked passage in a document."""

import re

from docmark.models import MarkedSpan
from docmark.passages.pattern import GROUP_INNER


def line_number_at(text: str, offset: int) -> int:
    """Return the 1-based line number containing ``offset``."""
    return text.count("\n", 0, offset) + 1


def scan(text: str, pattern: re.Pattern) -> list[MarkedSpan]:
    """Scan a document for marked passages.

    Matching is leftmost-first and non-overlapping: after a passage is
    consumed the scan resumes at its end, so delimiters inside it cannot
    start a second match.

    Args:
        text: Document text
        pattern: Pattern from compile_pattern()

    Returns:
        Spans in ascending offset order
    """
    spans = []
    line = 1
    counted_to = 0

    for match in pattern.finditer(text):
        start = match.start()
        # Count newlines incrementally; spans arrive in document order
        line += text.count("\n", counted_to, start)
        counted_to = start

        spans.append(
            MarkedSpan(
                raw_text=match.group(0),
                inner_text=match.group(GROUP_INNER),
                start=start,
                end=match.end(),
                line_number=line,
            )
        )

    return spans
