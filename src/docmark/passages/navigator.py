"""Jump between left delimiters."""

from typing import Optional


def go_to_next(text: str, cursor: int, delimiter_left: str) -> Optional[int]:
    """Find the next left delimiter at or after ``cursor``.

    This is a plain literal search, not a passage match: it will land on an
    opening delimiter even if the passage is never closed.

    Returns:
        Offset just past the delimiter, or None if there is no further one
    """
    found = text.find(delimiter_left, cursor)
    if found == -1:
        return None
    return found + len(delimiter_left)


def go_to_previous(text: str, cursor: int, delimiter_left: str) -> Optional[int]:
    """Find the nearest left delimiter that ends at or before ``cursor``.

    Returns:
        Offset of the delimiter's first character, or None
    """
    found = text.rfind(delimiter_left, 0, cursor)
    if found == -1:
        return None
    return found
