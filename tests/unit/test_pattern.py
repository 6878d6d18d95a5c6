"""Tests for the passage pattern."""

from __future__ import annotations

import pytest

from docmark.errors import ConfigurationError
from docmark.passages import GROUP_INNER, GROUP_LEFT, GROUP_RIGHT, compile_pattern


class TestCompilePattern:
    """compile_pattern builds a three-group literal-delimiter pattern."""

    def test_groups_split_delimiters_and_inner_text(self) -> None:
        """Groups are left delimiter, inner text, right delimiter."""
        match = compile_pattern("<<", ">>").search("see <<this claim>> here")

        assert match is not None
        assert match.group(0) == "<<this claim>>"
        assert match.group(GROUP_LEFT) == "<<"
        assert match.group(GROUP_INNER) == "this claim"
        assert match.group(GROUP_RIGHT) == ">>"

    @pytest.mark.parametrize(
        ("left", "right"),
        [("(*", "*)"), ("[[", "]]"), ("$", "$"), ("{^", "^}"), ("\\", "/")],
    )
    def test_delimiters_are_literal(self, left: str, right: str) -> None:
        """Regex metacharacters in delimiters match themselves."""
        text = f"before {left}quoted{right} after"
        match = compile_pattern(left, right).search(text)

        assert match is not None
        assert match.group(GROUP_INNER) == "quoted"

    def test_inner_text_stops_at_first_right_character(self) -> None:
        """A lone '>' inside a '>>' passage prevents the match."""
        assert compile_pattern("<<", ">>").search("<<a > b>>") is None

    def test_shortest_match(self) -> None:
        """The match ends at the first closing delimiter."""
        match = compile_pattern("[[", "]]").search("[[a]] [[b]]")

        assert match is not None
        assert match.group(0) == "[[a]]"

    @pytest.mark.parametrize(("left", "right"), [("", ">>"), ("<<", ""), ("", "")])
    def test_empty_delimiter_rejected(self, left: str, right: str) -> None:
        """Empty delimiters raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            compile_pattern(left, right)
