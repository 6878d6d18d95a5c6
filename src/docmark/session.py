"""A docmark session: one configuration wired to one host."""

import logging
import re
from typing import Optional

from docmark.config import DocmarkConfig
from docmark.engines import SearchDispatcher
from docmark.models import MarkedSpan, View
from docmark.passages import (
    HighlightController,
    compile_pattern,
    extract_at,
    go_to_next,
    go_to_previous,
    scan,
)
from docmark.protocols import DocumentHost, UrlOpener
from docmark.report import Report, ReportBuilder

logger = logging.getLogger(__name__)


class MarkSession:
    """Holds the configuration and the components derived from it.

    The compiled pattern is always derived from the current configuration;
    ``configure`` swaps both together and re-registers active highlights.
    """

    def __init__(
        self,
        host: DocumentHost,
        open_url: UrlOpener,
        config: Optional[DocmarkConfig] = None,
    ):
        self.host = host
        self.config = config or DocmarkConfig()
        self.pattern: re.Pattern = compile_pattern(
            self.config.delimiter_left, self.config.delimiter_right
        )
        self.highlights = HighlightController(host, self.config.highlight_style)
        self.dispatcher = SearchDispatcher(open_url)
        self.reports = ReportBuilder(host, self.dispatcher)

    def configure(self, delimiter_left: str, delimiter_right: str) -> None:
        """Switch delimiters.

        Raises:
            ConfigurationError: If either delimiter is empty; the session
                keeps its previous configuration
        """
        config = self.config.with_delimiters(delimiter_left, delimiter_right)
        pattern = compile_pattern(delimiter_left, delimiter_right)

        active = self.highlights.active_documents()
        for doc_id in active:
            self.highlights.deactivate(doc_id)

        self.config = config
        self.pattern = pattern

        for doc_id in active:
            self.highlights.activate(doc_id, pattern)
        logger.debug("Delimiters now %r / %r", delimiter_left, delimiter_right)

    # Operations on a document

    def scan(self, doc_id: str) -> list[MarkedSpan]:
        return scan(self.host.get_text(doc_id), self.pattern)

    def toggle_highlight(self, doc_id: str) -> bool:
        return self.highlights.toggle(doc_id, self.pattern)

    def goto_next(self, view: View) -> Optional[int]:
        """Move the view's cursor past the next left delimiter."""
        text = self.host.get_text(view.doc_id)
        target = go_to_next(text, view.cursor, self.config.delimiter_left)
        if target is not None:
            self.host.set_cursor(view, target)
        return target

    def goto_previous(self, view: View) -> Optional[int]:
        """Move the view's cursor to the previous left delimiter."""
        text = self.host.get_text(view.doc_id)
        target = go_to_previous(text, view.cursor, self.config.delimiter_left)
        if target is not None:
            self.host.set_cursor(view, target)
        return target

    def passage_at(self, view: View) -> Optional[str]:
        text = self.host.get_text(view.doc_id)
        return extract_at(text, view.cursor, self.config.delimiter_left, self.pattern)

    def build_report(self, doc_id: str) -> Optional[Report]:
        return self.reports.build(doc_id, self.config, self.pattern)
