"""Ordered registry of search engines."""

from docmark.engines.web import BING, DUCKDUCKGO, GOOGLE, GOOGLE_SCHOLAR, WIKIPEDIA
from docmark.errors import UnknownEngineError
from docmark.protocols import SearchEngine

# Registry of available engines, in chooser display order
_ENGINES: list[SearchEngine] = [
    GOOGLE,
    DUCKDUCKGO,
    BING,
    WIKIPEDIA,
    GOOGLE_SCHOLAR,
]


def engines() -> list[SearchEngine]:
    """Return the registered engines in display order."""
    return list(_ENGINES)


def engine_names() -> list[str]:
    """Return the chooser labels in display order."""
    return [engine.name for engine in _ENGINES]


def get_engine(name: str) -> SearchEngine:
    """Look up an engine by its display name.

    Raises:
        UnknownEngineError: If no registered engine has that name
    """
    for engine in _ENGINES:
        if engine.name == name:
            return engine
    raise UnknownEngineError(f"Unknown search engine: {name}")


def register_engine(engine: SearchEngine) -> None:
    """Register a custom engine (appended to the end of the chooser).

    Args:
        engine: An object implementing the SearchEngine protocol
    """
    _ENGINES.append(engine)


def unregister_engine(name: str) -> None:
    """Remove an engine by name; unknown names are ignored."""
    _ENGINES[:] = [engine for engine in _ENGINES if engine.name != name]
