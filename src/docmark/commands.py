"""User-facing commands.

Each command acts on the focused view (or on the current listing), and
reports failures to the user as a host message instead of raising.
"""

import logging
from typing import Callable, Optional, Sequence

from docmark.errors import DocmarkError
from docmark.models import View
from docmark.report import Report
from docmark.session import MarkSession

logger = logging.getLogger(__name__)

NO_VIEW = "No document open"
NO_REPORT = "No passage listing open"


class Commands:
    """The command surface bound to keys or subcommands by a front end."""

    def __init__(
        self,
        session: MarkSession,
        choose: Callable[[Sequence[str]], Optional[str]],
    ):
        self.session = session
        self.host = session.host
        self.choose = choose
        self.report: Optional[Report] = None

    @property
    def names(self) -> dict[str, Callable[..., object]]:
        """Command name -> handler."""
        return {
            "toggle-highlight": self.toggle_highlight,
            "goto-next": self.goto_next,
            "goto-prev": self.goto_prev,
            "search-at-point": self.search_at_point,
            "build-report": self.build_report,
            "visit": self.visit,
            "search": self.search,
        }

    def run(self, name: str, *args: object) -> object:
        logger.debug("Running %s", name)
        return self.names[name](*args)

    def _view(self) -> Optional[View]:
        view = self.host.current_view()
        if view is None:
            self.host.message(NO_VIEW)
        return view

    def toggle_highlight(self) -> None:
        view = self._view()
        if view is None:
            return
        active = self.session.toggle_highlight(view.doc_id)
        self.host.message("Highlighting on" if active else "Highlighting off")

    def goto_next(self) -> None:
        view = self._view()
        if view is not None and self.session.goto_next(view) is None:
            self.host.message("No next passage")

    def goto_prev(self) -> None:
        view = self._view()
        if view is not None and self.session.goto_previous(view) is None:
            self.host.message("No previous passage")

    def query_at_point(self) -> Optional[str]:
        """Inner text of the passage under the cursor, or None."""
        view = self._view()
        if view is None:
            return None
        return self.session.passage_at(view)

    def dispatch(self, query: Optional[str], choice: Optional[str]) -> Optional[str]:
        """Search ``query`` with the engine named ``choice``.

        This is the second half of search-at-point, split out for hosts
        whose chooser answers through a callback.
        """
        try:
            url = self.session.dispatcher.dispatch(query, choice)
        except DocmarkError as e:
            self.host.message(str(e))
            return None
        self.host.message(f"Opened {url}")
        return url

    def search_at_point(self) -> Optional[str]:
        view = self._view()
        if view is None:
            return None
        query = self.session.passage_at(view)
        try:
            url = self.session.dispatcher.choose_and_search(query, self.choose)
        except DocmarkError as e:
            self.host.message(str(e))
            return None
        self.host.message(f"Opened {url}")
        return url

    def build_report(self) -> Optional[Report]:
        view = self._view()
        if view is None:
            return None
        report = self.session.build_report(view.doc_id)
        if report is None:
            self.host.message(f"No marked passages found in {view.doc_id}")
            return None
        self.report = report
        self.host.show_listing(report)
        self.host.message(f"Found {len(report.entries)} marked passages")
        return report

    def visit(self, line: int) -> Optional[View]:
        if self.report is None:
            self.host.message(NO_REPORT)
            return None
        try:
            return self.session.reports.visit(self.report, line)
        except DocmarkError as e:
            self.host.message(str(e))
            return None

    def search(self, line: int) -> Optional[str]:
        if self.report is None:
            self.host.message(NO_REPORT)
            return None
        try:
            url = self.session.reports.search(self.report, line)
        except DocmarkError as e:
            self.host.message(str(e))
            return None
        self.host.message(f"Opened {url}")
        return url
