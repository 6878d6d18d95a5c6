"""Dispatch a passage's text to a web search engine."""

import logging
from typing import Optional

from docmark.engines.registry import engine_names, get_engine
from docmark.errors import NoEngineSelected, NoQueryError
from docmark.protocols import Chooser, SearchEngine, UrlOpener

logger = logging.getLogger(__name__)


class SearchDispatcher:
    """Turns a query and an engine choice into an opened URL."""

    def __init__(self, open_url: UrlOpener):
        self.open_url = open_url

    def search(self, query: Optional[str], engine: SearchEngine) -> str:
        """Open the engine's results page for ``query``.

        Returns:
            The URL that was opened

        Raises:
            NoQueryError: If the query is empty or None
        """
        if not query:
            raise NoQueryError()

        url = engine.build_url(query)
        logger.debug("Searching %s: %s", engine.name, url)
        self.open_url(url)
        return url

    def dispatch(self, query: Optional[str], choice: Optional[str]) -> str:
        """Search using the engine named by a chooser result.

        Raises:
            NoQueryError: If the query is empty or None
            NoEngineSelected: If ``choice`` is None (chooser dismissed)
            UnknownEngineError: If ``choice`` is not registered
        """
        if not query:
            raise NoQueryError()
        if choice is None:
            raise NoEngineSelected()
        return self.search(query, get_engine(choice))

    def choose_and_search(self, query: Optional[str], choose: Chooser) -> str:
        """Ask the user for an engine, then search.

        The query is checked first so the user is not prompted for nothing.
        """
        if not query:
            raise NoQueryError()
        return self.dispatch(query, choose(engine_names()))
