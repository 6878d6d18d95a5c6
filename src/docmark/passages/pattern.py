"""Build the regular expression that matches a marked passage."""

import logging
import re

from docmark.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Capture group numbers exposed by compile_pattern()
GROUP_LEFT = 1
GROUP_INNER = 2
GROUP_RIGHT = 3


def compile_pattern(delimiter_left: str, delimiter_right: str) -> re.Pattern:
    """Compile the passage pattern for a delimiter pair.

    Both delimiters are matched literally. The inner text is the shortest run
    of characters that does not contain the right delimiter's first
    character, so one passage never swallows the next. With ``>>`` as the
    right delimiter a lone ``>`` inside a passage therefore stops the match.

    Args:
        delimiter_left: Opening delimiter, e.g. "<<"
        delimiter_right: Closing delimiter, e.g. ">>"

    Returns:
        Pattern with groups (left delimiter, inner text, right delimiter)

    Raises:
        ConfigurationError: If either delimiter is empty
    """
    if not delimiter_left or not delimiter_right:
        raise ConfigurationError("Delimiters must be non-empty strings")

    left = re.escape(delimiter_left)
    right = re.escape(delimiter_right)
    stop = re.escape(delimiter_right[0])
    pattern = re.compile(f"({left})([^{stop}]*?)({right})")
    logger.debug("Compiled passage pattern %r", pattern.pattern)
    return pattern
