"""Utility functions for docmark."""

from docmark.utils.text import decode_text, is_text_file, looks_binary

__all__ = ["decode_text", "is_text_file", "looks_binary"]
