"""Tests for the highlight controller."""

from __future__ import annotations

from docmark.passages import HighlightController, compile_pattern
from docmark.workspace import Workspace

from tests.helpers import open_document, record_events

PATTERN = compile_pattern("<<", ">>")


class TestHighlightController:
    """Activation registers one rule; deactivation removes that rule."""

    def test_initially_inactive(self, workspace: Workspace) -> None:
        open_document(workspace, "doc", "<<a>>")
        controller = HighlightController(workspace)

        assert not controller.is_active("doc")
        assert workspace.highlight_rules("doc") == []

    def test_activate_paints_all_three_groups(self, workspace: Workspace) -> None:
        """Delimiters and inner text are all painted."""
        open_document(workspace, "doc", "x <<abc>> y")
        controller = HighlightController(workspace, style="bold red")

        controller.activate("doc", PATTERN)

        assert workspace.painted_ranges("doc") == [
            (2, 4, "bold red"),
            (4, 7, "bold red"),
            (7, 9, "bold red"),
        ]

    def test_activate_refreshes_immediately(self, workspace: Workspace) -> None:
        open_document(workspace, "doc", "<<a>>")
        refreshed = record_events(workspace, "refresh")

        HighlightController(workspace).activate("doc", PATTERN)

        assert refreshed == ["doc"]

    def test_activate_twice_registers_one_rule(self, workspace: Workspace) -> None:
        """A second activate is a no-op."""
        open_document(workspace, "doc", "<<a>>")
        controller = HighlightController(workspace)

        controller.activate("doc", PATTERN)
        controller.activate("doc", PATTERN)

        assert len(workspace.highlight_rules("doc")) == 1

    def test_toggle_twice_restores_state(self, workspace: Workspace) -> None:
        """toggle; toggle leaves no rule and no painting."""
        open_document(workspace, "doc", "<<a>> <<b>>")
        controller = HighlightController(workspace)

        assert controller.toggle("doc", PATTERN) is True
        assert controller.toggle("doc", PATTERN) is False

        assert not controller.is_active("doc")
        assert workspace.highlight_rules("doc") == []
        assert workspace.painted_ranges("doc") == []

    def test_deactivate_removes_rule_from_activation(self, workspace: Workspace) -> None:
        """The stored rule is removed even if a different pattern is current."""
        open_document(workspace, "doc", "<<a>> [[b]]")
        controller = HighlightController(workspace)
        controller.activate("doc", PATTERN)
        added = controller.rule_for("doc")

        controller.toggle("doc", compile_pattern("[[", "]]"))

        assert added is not None
        assert added not in workspace.highlight_rules("doc")
        assert workspace.highlight_rules("doc") == []

    def test_deactivate_when_inactive_is_harmless(self, workspace: Workspace) -> None:
        open_document(workspace, "doc", "<<a>>")
        refreshed = record_events(workspace, "refresh")

        HighlightController(workspace).deactivate("doc")

        assert refreshed == []

    def test_documents_are_independent(self, workspace: Workspace) -> None:
        open_document(workspace, "one", "<<a>>")
        open_document(workspace, "two", "<<b>>")
        controller = HighlightController(workspace)

        controller.activate("one", PATTERN)

        assert controller.active_documents() == ["one"]
        assert workspace.painted_ranges("two") == []
