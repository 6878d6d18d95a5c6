"""Passage matching, scanning, navigation, extraction and highlighting."""

from docmark.passages.extractor import extract_at, find_enclosing
from docmark.passages.highlight import HighlightController
from docmark.passages.navigator import go_to_next, go_to_previous
from docmark.passages.pattern import (
    GROUP_INNER,
    GROUP_LEFT,
    GROUP_RIGHT,
    compile_pattern,
)
from docmark.passages.scanner import line_number_at, scan

__all__ = [
    "compile_pattern",
    "GROUP_LEFT",
    "GROUP_INNER",
    "GROUP_RIGHT",
    "scan",
    "line_number_at",
    "go_to_next",
    "go_to_previous",
    "extract_at",
    "find_enclosing",
    "HighlightController",
]
