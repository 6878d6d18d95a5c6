"""Per-document highlight toggle."""

import logging
import re
from typing import Optional

from docmark.config import DEFAULT_STYLE
from docmark.models import HighlightRule
from docmark.protocols import DocumentHost

logger = logging.getLogger(__name__)


class HighlightController:
    """Tracks which documents have the passage highlight switched on.

    Each active document holds exactly one rule: the one registered at
    activation. Deactivation removes that stored rule, so a delimiter change
    in between cannot leave an orphaned rule behind.
    """

    def __init__(self, host: DocumentHost, style: str = DEFAULT_STYLE):
        self.host = host
        self.style = style
        self._rules: dict[str, HighlightRule] = {}

    def is_active(self, doc_id: str) -> bool:
        return doc_id in self._rules

    def active_documents(self) -> list[str]:
        return list(self._rules)

    def rule_for(self, doc_id: str) -> Optional[HighlightRule]:
        return self._rules.get(doc_id)

    def activate(self, doc_id: str, pattern: re.Pattern) -> None:
        """Register a rule painting every passage in ``doc_id``."""
        if doc_id in self._rules:
            return

        rule = HighlightRule(pattern=pattern, style=self.style)
        self.host.add_highlight_rule(doc_id, rule)
        self._rules[doc_id] = rule
        self.host.refresh(doc_id)
        logger.debug("Highlight on for %s", doc_id)

    def deactivate(self, doc_id: str) -> None:
        """Remove the rule added by activate() and re-render."""
        rule = self._rules.pop(doc_id, None)
        if rule is None:
            return

        self.host.remove_highlight_rule(doc_id, rule)
        self.host.refresh(doc_id)
        logger.debug("Highlight off for %s", doc_id)

    def toggle(self, doc_id: str, pattern: re.Pattern) -> bool:
        """Flip the highlight for ``doc_id``.

        Returns:
            True if the highlight is now on
        """
        if self.is_active(doc_id):
            self.deactivate(doc_id)
            return False
        self.activate(doc_id, pattern)
        return True
