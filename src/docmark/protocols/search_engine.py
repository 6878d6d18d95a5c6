"""Protocol for web search engines."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SearchEngine(Protocol):
    """Protocol for web search engines.

    Any object with a display name and a URL builder qualifies; engines are
    kept in an ordered registry rather than a class hierarchy.
    """

    @property
    def name(self) -> str:
        """Return the label shown in the engine chooser."""
        ...

    def build_url(self, query: str) -> str:
        """Return the search URL for ``query`` (percent-encoded)."""
        ...
