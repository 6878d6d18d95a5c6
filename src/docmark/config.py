"""Delimiter and display configuration."""

import os
from dataclasses import dataclass, replace

from docmark.errors import ConfigurationError

DEFAULT_LEFT = "<<"
DEFAULT_RIGHT = ">>"
DEFAULT_STYLE = "bold black on yellow"
DEFAULT_ENGINE = "Google"

# Environment overrides, read by DocmarkConfig.from_env()
ENV_PREFIX = "DOCMARK_"


@dataclass(frozen=True)
class DocmarkConfig:
    """Configuration owned by a session.

    Values are immutable; use ``with_delimiters`` to derive a new one so
    that anything compiled from the old delimiters can be re-derived.
    """

    delimiter_left: str = DEFAULT_LEFT
    delimiter_right: str = DEFAULT_RIGHT
    highlight_style: str = DEFAULT_STYLE
    default_engine: str = DEFAULT_ENGINE

    def __post_init__(self) -> None:
        if not self.delimiter_left:
            raise ConfigurationError("Left delimiter must not be empty")
        if not self.delimiter_right:
            raise ConfigurationError("Right delimiter must not be empty")

    def with_delimiters(self, left: str, right: str) -> "DocmarkConfig":
        """Return a copy using a different delimiter pair."""
        return replace(self, delimiter_left=left, delimiter_right=right)

    def strip_delimiters(self, raw_text: str) -> str:
        """Cut one delimiter's length off each end of ``raw_text``."""
        return raw_text[len(self.delimiter_left) : len(raw_text) - len(self.delimiter_right)]

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "DocmarkConfig":
        """Build a configuration from DOCMARK_* environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests)

        Returns:
            Configuration with defaults for every unset variable
        """
        env = os.environ if environ is None else environ
        return cls(
            delimiter_left=env.get(f"{ENV_PREFIX}DELIMITER_LEFT", DEFAULT_LEFT),
            delimiter_right=env.get(f"{ENV_PREFIX}DELIMITER_RIGHT", DEFAULT_RIGHT),
            highlight_style=env.get(f"{ENV_PREFIX}HIGHLIGHT_STYLE", DEFAULT_STYLE),
            default_engine=env.get(f"{ENV_PREFIX}DEFAULT_ENGINE", DEFAULT_ENGINE),
        )
