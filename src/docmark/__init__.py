"""docmark - find, highlight and report delimiter-marked passages."""

__version__ = "0.1.0"
