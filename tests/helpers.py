"""Test doubles for the host's URL opener and chooser."""

from __future__ import annotations

from typing import Sequence

from docmark.models import Document, View
from docmark.workspace import Workspace


class RecordingOpener:
    """URL opener that remembers instead of launching a browser."""

    def __init__(self) -> None:
        self.urls: list[str] = []

    def __call__(self, url: str) -> None:
        self.urls.append(url)


class ScriptedChooser:
    """Chooser that returns a fixed answer and records what it was offered."""

    def __init__(self, answer: str | None) -> None:
        self.answer = answer
        self.offered: list[list[str]] = []

    def __call__(self, labels: Sequence[str]) -> str | None:
        self.offered.append(list(labels))
        return self.answer


def open_document(workspace: Workspace, doc_id: str, text: str) -> View:
    """Add a document and open a focused view on it."""
    workspace.add_document(Document(doc_id=doc_id, text=text))
    return workspace.open_view(doc_id)


def record_events(workspace: Workspace, kind: str) -> list[str | None]:
    """Collect the document ids of every ``kind`` event the workspace emits."""
    seen: list[str | None] = []

    def listener(event: str, doc_id: str | None) -> None:
        if event == kind:
            seen.append(doc_id)

    workspace.subscribe(listener)
    return seen
