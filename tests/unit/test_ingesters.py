"""Tests for loading documents from files and folders."""

from __future__ import annotations

from pathlib import Path

import pytest

from docmark.ingesters import FileIngester, FolderIngester, get_ingester, load_documents
from docmark.utils import is_text_file, looks_binary


def make_tree(root: Path) -> None:
    (root / "a.txt").write_text("alpha <<one>>", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "b.md").write_text("beta", encoding="utf-8")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "c.txt").write_text("hidden", encoding="utf-8")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "d.txt").write_text("vendored", encoding="utf-8")
    (root / "image.png").write_bytes(b"\x89PNG\r\n")
    (root / "data.txt").write_bytes(b"\x00\x01\x02binary")


class TestGetIngester:
    def test_file(self, tmp_path: Path) -> None:
        path = tmp_path / "x.txt"
        path.write_text("x", encoding="utf-8")

        assert isinstance(get_ingester(path), FileIngester)

    def test_folder(self, tmp_path: Path) -> None:
        assert isinstance(get_ingester(tmp_path), FolderIngester)

    def test_missing(self, tmp_path: Path) -> None:
        assert get_ingester(tmp_path / "nope") is None
        assert load_documents(tmp_path / "nope") is None


class TestFolderIngester:
    def test_text_files_only(self, tmp_path: Path) -> None:
        """Hidden, vendored and binary files are skipped."""
        make_tree(tmp_path)

        documents = load_documents(tmp_path)

        assert documents is not None
        assert [d.doc_id for d in documents] == ["a.txt", "sub/b.md"]
        assert documents[0].text == "alpha <<one>>"
        assert documents[0].metadata is not None
        assert documents[0].metadata.extension == ".txt"


class TestFileIngester:
    def test_doc_id_is_file_name(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("café <<x>>", encoding="utf-8")

        documents = load_documents(path)

        assert documents is not None
        assert [(d.doc_id, d.text) for d in documents] == [("notes.txt", "café <<x>>")]

    def test_binary_file_yields_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\x00" * 10)

        assert load_documents(path) == []

    def test_unreadable_file_is_skipped(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = tmp_path / "locked.txt"
        path.write_text("<<x>>", encoding="utf-8")

        def refuse(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "read_bytes", refuse)

        assert load_documents(path) == []
        assert f"Skipping {path}" in caplog.text


class TestTextDetection:
    def test_utf8_prose_is_text(self) -> None:
        assert not looks_binary("naïve café – ok".encode("utf-8"))

    def test_nul_byte_is_binary(self) -> None:
        assert looks_binary(b"abc\x00def")

    def test_extension_wins(self) -> None:
        assert not is_text_file("photo.jpg", b"plain")
