"""Tests for DocmarkConfig."""

from __future__ import annotations

import pytest

from docmark.config import DocmarkConfig
from docmark.errors import ConfigurationError


class TestDocmarkConfig:
    """Configuration defaults, validation and environment overrides."""

    def test_defaults(self) -> None:
        config = DocmarkConfig()

        assert config.delimiter_left == "<<"
        assert config.delimiter_right == ">>"
        assert config.default_engine == "Google"

    @pytest.mark.parametrize(("left", "right"), [("", ">>"), ("<<", "")])
    def test_empty_delimiters_rejected(self, left: str, right: str) -> None:
        with pytest.raises(ConfigurationError):
            DocmarkConfig(delimiter_left=left, delimiter_right=right)

    def test_with_delimiters_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            DocmarkConfig().with_delimiters("", "]]")

    def test_with_delimiters_keeps_other_fields(self) -> None:
        config = DocmarkConfig(default_engine="Bing").with_delimiters("[[", "]]")

        assert config.delimiter_left == "[["
        assert config.default_engine == "Bing"

    def test_strip_delimiters(self) -> None:
        config = DocmarkConfig(delimiter_left="{", delimiter_right="}}}")

        assert config.strip_delimiters("{inner}}}") == "inner"

    def test_from_env(self) -> None:
        config = DocmarkConfig.from_env(
            {
                "DOCMARK_DELIMITER_LEFT": "[[",
                "DOCMARK_DELIMITER_RIGHT": "]]",
                "DOCMARK_DEFAULT_ENGINE": "Wikipedia",
            }
        )

        assert (config.delimiter_left, config.delimiter_right) == ("[[", "]]")
        assert config.default_engine == "Wikipedia"
        assert config.highlight_style == DocmarkConfig().highlight_style

    def test_from_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCMARK_DELIMITER_LEFT", "((")

        assert DocmarkConfig.from_env().delimiter_left == "(("

    def test_from_env_rejects_empty(self) -> None:
        with pytest.raises(ConfigurationError):
            DocmarkConfig.from_env({"DOCMARK_DELIMITER_RIGHT": ""})
