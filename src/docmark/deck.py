"""Mark Deck - a TUI for browsing marked passages."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.screen import ModalScreen
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Label,
    Log,
    OptionList,
    Rule,
    Static,
)

from docmark.commands import Commands
from docmark.config import DocmarkConfig
from docmark.engines import engine_names
from docmark.models import Document, View
from docmark.report import Report
from docmark.session import MarkSession
from docmark.workspace import Workspace


def line_start(text: str, offset: int) -> int:
    return text.rfind("\n", 0, offset) + 1


def line_end(text: str, offset: int) -> int:
    end = text.find("\n", offset)
    return len(text) if end == -1 else end


class StatusPanel(Static):
    """Where the cursor is and what is switched on."""

    def show_status(
        self, view: Optional[View], session: MarkSession, passages: int
    ) -> None:
        if view is None:
            self.update("[dim]No document open[/]")
            return

        # Doc ids and delimiters are user text, so no markup here
        config = session.config
        highlight = (
            ("ON", "green") if session.highlights.is_active(view.doc_id) else ("off", "dim")
        )
        self.update(
            Text.assemble(
                ("DOCUMENT", "bold"),
                "\n  ",
                (view.doc_id, "cyan"),
                "\n\n",
                ("CURSOR", "bold"),
                f"   {view.cursor:,}\n",
                ("MARKS", "bold"),
                f"    {config.delimiter_left} ... {config.delimiter_right}\n",
                ("HILITE", "bold"),
                "   ",
                highlight,
                "\n",
                ("FOUND", "bold"),
                "    ",
                (f"{passages:,}", "magenta"),
            )
        )


class DocumentPane(Static, can_focus=True):
    """Renders the focused view: painted passages plus a block cursor."""

    BINDINGS = [
        Binding("left", "move(-1)", "Left", show=False),
        Binding("right", "move(1)", "Right", show=False),
        Binding("up", "line(-1)", "Up", show=False),
        Binding("down", "line(1)", "Down", show=False),
        Binding("home", "edge('start')", "Home", show=False),
        Binding("end", "edge('end')", "End", show=False),
    ]

    def __init__(self, workspace: Workspace, **kwargs) -> None:
        super().__init__(**kwargs)
        self.workspace = workspace

    def redraw(self) -> None:
        view = self.workspace.current_view()
        if view is None:
            self.update("[dim]No document open[/]")
            return

        text = self.workspace.get_text(view.doc_id)
        height = max(self.size.height, 1)
        view.height = height

        # Keep the cursor inside the window
        cursor_line = text.count("\n", 0, view.cursor)
        if cursor_line < view.top_line:
            view.top_line = cursor_line
        elif cursor_line >= view.top_line + height:
            view.top_line = cursor_line - height + 1

        lines = text.split("\n")
        first = min(view.top_line, len(lines) - 1)
        start = sum(len(line) + 1 for line in lines[:first])
        window = "\n".join(lines[first : first + height])

        rendered = Text(window, no_wrap=True, overflow="ellipsis")
        for lo, hi, style in self.workspace.painted_ranges(view.doc_id):
            lo, hi = max(lo - start, 0), min(hi - start, len(window))
            if lo < hi:
                rendered.stylize(style, lo, hi)

        at = view.cursor - start
        if at < len(window) and window[at] != "\n":
            rendered.stylize("reverse", at, at + 1)
        elif at == len(window):
            rendered.append(" ", style="reverse")
        self.update(rendered)

    def on_resize(self) -> None:
        self.redraw()

    def _move_to(self, offset: int) -> None:
        view = self.workspace.current_view()
        if view is not None:
            self.workspace.set_cursor(view, offset)

    def action_move(self, delta: int) -> None:
        view = self.workspace.current_view()
        if view is not None:
            self._move_to(view.cursor + delta)

    def action_line(self, delta: int) -> None:
        view = self.workspace.current_view()
        if view is None:
            return
        text = self.workspace.get_text(view.doc_id)
        column = view.cursor - line_start(text, view.cursor)
        if delta < 0:
            here = line_start(text, view.cursor)
            if here == 0:
                return
            target = line_start(text, here - 1)
        else:
            here = line_end(text, view.cursor)
            if here == len(text):
                return
            target = here + 1
        self._move_to(min(target + column, line_end(text, target)))

    def action_edge(self, where: str) -> None:
        view = self.workspace.current_view()
        if view is None:
            return
        text = self.workspace.get_text(view.doc_id)
        if where == "start":
            self._move_to(line_start(text, view.cursor))
        else:
            self._move_to(line_end(text, view.cursor))


class ListingTable(DataTable):
    """The passage listing; row N is report line N."""

    def on_mount(self) -> None:
        self.add_columns("Line", "Offset", "Passage")
        self.cursor_type = "row"

    def show_report(self, report: Report) -> None:
        self.clear()
        for index, line in enumerate(report.lines):
            entry = line.entry
            if entry is None:
                self.add_row("", "", Text(line.text, style="bold"), key=str(index))
                continue
            passage = " ".join(entry.raw_text.split())
            if len(passage) > 80:
                passage = passage[:77] + "..."
            self.add_row(
                Text(str(entry.line_number), style="cyan"),
                Text(str(entry.source_offset), style="dim"),
                Text(passage),
                key=str(index),
            )
        self.move_cursor(row=min(1, len(report.lines) - 1))


class EngineChooser(ModalScreen[Optional[str]]):
    """Pick a search engine; escape dismisses with None."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    DEFAULT_CSS = """
    EngineChooser {
        align: center middle;
    }

    #chooser {
        width: 40;
        height: auto;
        border: round $accent;
        background: $surface-darken-1;
        padding: 1;
    }
    """

    def __init__(self, labels: list[str]) -> None:
        super().__init__()
        self.labels = labels

    def compose(self) -> ComposeResult:
        with Vertical(id="chooser"):
            yield Label("Search with...", classes="section-title")
            yield OptionList(*self.labels, id="engine-list")

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(self.labels[event.option_index])

    def action_cancel(self) -> None:
        self.dismiss(None)


class MarkDeck(App):
    """The docmark Mark Deck - passage browsing TUI."""

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        background: $primary-darken-3;
        color: $text;
    }

    Footer {
        background: $primary-darken-3;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 32;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    StatusPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    DocumentPane {
        height: 1fr;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }

    DocumentPane:focus {
        border: round $accent;
    }

    ListingTable {
        height: 12;
        border: round $primary-darken-1;
    }

    #log-panel {
        height: 1fr;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("h", "run_command('toggle-highlight')", "Highlight", show=True),
        Binding("n", "run_command('goto-next')", "Next", show=True),
        Binding("p", "run_command('goto-prev')", "Prev", show=True),
        Binding("s", "search_at_point", "Search", show=True),
        Binding("r", "run_command('build-report')", "Report", show=True),
        Binding("g", "search_entry", "Search entry", show=True),
        Binding("o", "next_document", "Next doc"),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "docmark Mark Deck"
    SUB_TITLE = "Marked Passage Browser"

    def __init__(
        self,
        documents: list[Document],
        config: Optional[DocmarkConfig] = None,
        workspace: Optional[Workspace] = None,
    ) -> None:
        super().__init__()
        self.workspace = workspace or Workspace(max_visible=1)
        self.workspace.add_documents(documents)
        self.mark_session = MarkSession(self.workspace, self.workspace.open_url, config)
        # The chooser is modal and answers through a callback, see action_search_at_point
        self.mark_commands = Commands(self.mark_session, lambda labels: None)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("STATUS", classes="section-title")
                yield StatusPanel()
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True, max_lines=1000)

            with Vertical(id="center-panel"):
                yield Label("DOCUMENT", classes="section-title")
                yield DocumentPane(self.workspace, id="document")
                yield Rule()
                yield Label("PASSAGES", classes="section-title")
                yield ListingTable(id="listing")

        yield Footer()

    def on_mount(self) -> None:
        """Open the first document and start listening to the workspace."""
        self.workspace.subscribe(self.on_workspace_event)
        self._write_log("Mark Deck initialized")
        if self.workspace.documents:
            self.workspace.open_view(next(iter(self.workspace.documents)))
        self.query_one(DocumentPane).focus()
        self._sync_widgets()

    def _write_log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def _sync_widgets(self) -> None:
        view = self.workspace.current_view()
        passages = len(self.mark_session.scan(view.doc_id)) if view else 0
        self.query_one(StatusPanel).show_status(view, self.mark_session, passages)
        self.query_one(DocumentPane).redraw()

    def on_workspace_event(self, event: str, doc_id: Optional[str]) -> None:
        """Mirror workspace changes into the widgets."""
        if event == "message":
            self._write_log(self.workspace.messages[-1])
        elif event == "listing" and isinstance(self.workspace.listing, Report):
            self.query_one(ListingTable).show_report(self.workspace.listing)
        else:
            self._sync_widgets()

    def action_run_command(self, name: str) -> None:
        self.mark_commands.run(name)

    def action_search_at_point(self) -> None:
        query = self.mark_commands.query_at_point()
        if not query:
            self.mark_commands.dispatch(query, None)
            return

        def chosen(choice: Optional[str]) -> None:
            self.mark_commands.dispatch(query, choice)

        self.push_screen(EngineChooser(engine_names()), chosen)

    def action_search_entry(self) -> None:
        self.mark_commands.search(self.query_one(ListingTable).cursor_row)

    def action_next_document(self) -> None:
        """Show the next loaded document, reusing its view if it has one."""
        ids = list(self.workspace.documents)
        view = self.workspace.current_view()
        if not ids or view is None:
            return
        doc_id = ids[(ids.index(view.doc_id) + 1) % len(ids)]
        for candidate in self.workspace.views:
            if candidate.doc_id == doc_id:
                view.visible = False
                self.workspace.focus(candidate)
                return
        self.workspace.open_view(doc_id)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter on a listing row visits its passage."""
        if self.mark_commands.visit(event.cursor_row) is not None:
            self.query_one(DocumentPane).focus()


def main(documents: list[Document], config: Optional[DocmarkConfig] = None) -> None:
    """Run the Mark Deck TUI."""
    app = MarkDeck(documents, config)
    app.run()
