"""In-memory host: documents, views, highlight rules and messages."""

import logging
import webbrowser
from typing import Callable, Iterable, Optional, Sequence

from docmark.errors import UnknownDocumentError
from docmark.models import Document, HighlightRule, View
from docmark.passages import line_number_at

logger = logging.getLogger(__name__)

# (start, end, style) - one painted range of document text
PaintedRange = tuple[int, int, str]

# Listener signature: (event name, document id or None)
Listener = Callable[[str, Optional[str]], None]


def open_in_browser(url: str) -> None:
    """Open ``url`` in the system web browser."""
    webbrowser.open_new_tab(url)


def never_choose(labels: Sequence[str]) -> Optional[str]:
    """Chooser for non-interactive hosts: always dismissed."""
    return None


class Workspace:
    """A session's documents and the views showing them.

    Implements the DocumentHost protocol. Front ends (CLI, TUI, MCP) read
    state back out of it and subscribe to change events to redraw.
    """

    # Only the most recent messages are kept
    MAX_MESSAGES = 500

    def __init__(
        self,
        open_url: Callable[[str], None] = open_in_browser,
        choose: Callable[[Sequence[str]], Optional[str]] = never_choose,
        max_visible: int = 2,
    ):
        self.open_url = open_url
        self.choose = choose
        self.max_visible = max_visible
        self.documents: dict[str, Document] = {}
        self.views: list[View] = []
        self.listing: object = None
        self.messages: list[str] = []
        self._focus: Optional[View] = None
        self._next_view_id = 1
        self._rules: dict[str, list[HighlightRule]] = {}
        self._painted: dict[str, list[PaintedRange]] = {}
        self._listeners: list[Listener] = []

    # Documents

    def add_document(self, doc: Document) -> None:
        """Add (or replace) a document. Views on it are kept."""
        self.documents[doc.doc_id] = doc
        if doc.doc_id in self._painted:
            self.refresh(doc.doc_id)

    def add_documents(self, docs: Iterable[Document]) -> None:
        for doc in docs:
            self.add_document(doc)

    def document(self, doc_id: str) -> Document:
        try:
            return self.documents[doc_id]
        except KeyError:
            raise UnknownDocumentError(f"No such document: {doc_id}") from None

    def get_text(self, doc_id: str) -> str:
        return self.document(doc_id).text

    def set_text(self, doc_id: str, text: str) -> None:
        """Replace a document's text, as an editor would after an edit."""
        self.document(doc_id).text = text
        for view in self.views:
            if view.doc_id == doc_id:
                view.cursor = min(view.cursor, len(text))
        self.refresh(doc_id)

    # Views

    def current_view(self) -> Optional[View]:
        return self._focus

    def find_visible_view(self, doc_id: str) -> Optional[View]:
        for view in self.views:
            if view.visible and view.doc_id == doc_id:
                return view
        return None

    def open_view(self, doc_id: str) -> View:
        """Open and focus a new view on ``doc_id``.

        When more than ``max_visible`` views are showing, the oldest one
        other than the new view is hidden. Hidden views on the same document
        are dropped; the new view takes their place.
        """
        self.document(doc_id)
        self.views = [v for v in self.views if v.visible or v.doc_id != doc_id]
        view = View(view_id=self._next_view_id, doc_id=doc_id)
        self._next_view_id += 1
        self.views.append(view)
        self._focus = view

        visible = [v for v in self.views if v.visible]
        for old in visible[: max(len(visible) - self.max_visible, 0)]:
            old.visible = False

        logger.debug("Opened view %d on %s", view.view_id, doc_id)
        self._emit("view", doc_id)
        return view

    def focus(self, view: View) -> None:
        view.visible = True
        self._focus = view
        self._emit("view", view.doc_id)

    def set_cursor(self, view: View, offset: int) -> None:
        text = self.get_text(view.doc_id)
        view.cursor = max(0, min(offset, len(text)))
        self._emit("cursor", view.doc_id)

    def recenter(self, view: View) -> None:
        line = line_number_at(self.get_text(view.doc_id), view.cursor) - 1
        view.top_line = max(0, line - view.height // 2)
        self._emit("cursor", view.doc_id)

    # Highlighting

    def add_highlight_rule(self, doc_id: str, rule: HighlightRule) -> None:
        self.document(doc_id)
        self._rules.setdefault(doc_id, []).append(rule)

    def remove_highlight_rule(self, doc_id: str, rule: HighlightRule) -> None:
        rules = self._rules.get(doc_id, [])
        if rule in rules:
            rules.remove(rule)
        if not rules:
            self._rules.pop(doc_id, None)

    def highlight_rules(self, doc_id: str) -> list[HighlightRule]:
        return list(self._rules.get(doc_id, []))

    def refresh(self, doc_id: str) -> None:
        """Recompute the painted ranges for ``doc_id`` now."""
        text = self.get_text(doc_id)
        painted: list[PaintedRange] = []
        for rule in self._rules.get(doc_id, []):
            for match in rule.pattern.finditer(text):
                for group in rule.groups:
                    start, end = match.span(group)
                    if start < end:
                        painted.append((start, end, rule.style))
        self._painted[doc_id] = painted
        self._emit("refresh", doc_id)

    def painted_ranges(self, doc_id: str) -> list[PaintedRange]:
        """Ranges painted at the last refresh."""
        return list(self._painted.get(doc_id, []))

    # Listings and messages

    def show_listing(self, listing: object) -> None:
        self.listing = listing
        self._emit("listing", None)

    def message(self, text: str) -> None:
        logger.info(text)
        self.messages.append(text)
        del self.messages[: -self.MAX_MESSAGES]
        self._emit("message", None)

    # Change notification

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: str, doc_id: Optional[str]) -> None:
        for listener in self._listeners:
            listener(event, doc_id)
