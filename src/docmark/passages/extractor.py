"""Extract the passage under the cursor."""

import re
from typing import Optional

from docmark.passages.pattern import GROUP_INNER


def find_enclosing(
    text: str, cursor: int, delimiter_left: str, pattern: re.Pattern
) -> Optional[re.Match]:
    """Locate the passage match that encloses ``cursor``.

    Searches backward for the left delimiter, then matches the full pattern
    forward from one character before it. Starting one character early keeps
    the opening delimiter inside the forward search window.

    Returns:
        The match, or None when the cursor is not inside a passage
    """
    opening = text.rfind(delimiter_left, 0, cursor)
    if opening == -1:
        return None

    match = pattern.search(text, max(opening - 1, 0))
    if match is None:
        return None

    # A match that ends before the cursor (or starts after it) does not enclose it
    if not match.start() < cursor < match.end():
        return None
    return match


def extract_at(
    text: str, cursor: int, delimiter_left: str, pattern: re.Pattern
) -> Optional[str]:
    """Return the inner text of the passage at ``cursor``, or None."""
    match = find_enclosing(text, cursor, delimiter_left, pattern)
    if match is None:
        return None
    return match.group(GROUP_INNER)
