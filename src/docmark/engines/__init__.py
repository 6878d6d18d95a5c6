"""Search engines for looking up passage text on the web."""

from docmark.engines.dispatcher import SearchDispatcher
from docmark.engines.registry import (
    engine_names,
    engines,
    get_engine,
    register_engine,
    unregister_engine,
)
from docmark.engines.web import UrlTemplateEngine

__all__ = [
    "engines",
    "engine_names",
    "get_engine",
    "register_engine",
    "unregister_engine",
    "SearchDispatcher",
    "UrlTemplateEngine",
]
