"""Protocols for the host environment that owns documents and views."""

from typing import Optional, Protocol, Sequence, runtime_checkable

from docmark.models import HighlightRule, View


@runtime_checkable
class DocumentHost(Protocol):
    """Protocol for the editor environment docmark runs inside.

    The host owns buffers, cursors and rendering. docmark only reads text,
    moves cursors and registers highlight rules through this interface.
    """

    def get_text(self, doc_id: str) -> str:
        """Return the full text of a document."""
        ...

    def current_view(self) -> Optional[View]:
        """Return the view that has focus, if any."""
        ...

    def find_visible_view(self, doc_id: str) -> Optional[View]:
        """Return a visible view showing ``doc_id``, if one exists."""
        ...

    def open_view(self, doc_id: str) -> View:
        """Open a new view on ``doc_id`` and give it focus."""
        ...

    def set_cursor(self, view: View, offset: int) -> None:
        """Move a view's cursor to a document offset."""
        ...

    def recenter(self, view: View) -> None:
        """Scroll a view so its cursor line sits mid-window."""
        ...

    def add_highlight_rule(self, doc_id: str, rule: HighlightRule) -> None:
        """Register a highlight rule for a document."""
        ...

    def remove_highlight_rule(self, doc_id: str, rule: HighlightRule) -> None:
        """Unregister a previously added highlight rule."""
        ...

    def refresh(self, doc_id: str) -> None:
        """Recompute styling for a document immediately."""
        ...

    def show_listing(self, listing: object) -> None:
        """Display a read-only listing (a report)."""
        ...

    def message(self, text: str) -> None:
        """Show a short message to the user."""
        ...


@runtime_checkable
class UrlOpener(Protocol):
    """Fire-and-forget URL opening (usually a web browser)."""

    def __call__(self, url: str) -> None: ...


@runtime_checkable
class Chooser(Protocol):
    """Ask the user to pick one label; ``None`` means dismissed."""

    def __call__(self, labels: Sequence[str]) -> Optional[str]: ...
