"""Protocol definitions for extensible components."""

from docmark.protocols.host import Chooser, DocumentHost, UrlOpener
from docmark.protocols.ingester import Ingester
from docmark.protocols.search_engine import SearchEngine

__all__ = ["DocumentHost", "UrlOpener", "Chooser", "Ingester", "SearchEngine"]
