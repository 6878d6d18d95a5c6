"""Shared fixtures for docmark tests."""

from __future__ import annotations

import pytest

from docmark.commands import Commands
from docmark.session import MarkSession
from docmark.workspace import Workspace

from tests.helpers import RecordingOpener, ScriptedChooser


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DOCMARK_* variables from the developer's shell out of tests."""
    for key in (
        "DOCMARK_DELIMITER_LEFT",
        "DOCMARK_DELIMITER_RIGHT",
        "DOCMARK_HIGHLIGHT_STYLE",
        "DOCMARK_DEFAULT_ENGINE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def workspace(opener: RecordingOpener) -> Workspace:
    return Workspace(open_url=opener)


@pytest.fixture
def session(workspace: Workspace, opener: RecordingOpener) -> MarkSession:
    return MarkSession(workspace, opener)


@pytest.fixture
def chooser() -> ScriptedChooser:
    return ScriptedChooser("Google")


@pytest.fixture
def commands(session: MarkSession, chooser: ScriptedChooser) -> Commands:
    return Commands(session, chooser)
