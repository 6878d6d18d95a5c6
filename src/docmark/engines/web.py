"""URL-template search engines."""

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class UrlTemplateEngine:
    """Search engine defined by a URL with a ``{query}`` placeholder."""

    name: str
    template: str

    def build_url(self, query: str) -> str:
        """Percent-encode ``query`` and substitute it into the template."""
        return self.template.format(query=quote(query, safe=""))


GOOGLE = UrlTemplateEngine("Google", "https://www.google.com/search?q={query}")
DUCKDUCKGO = UrlTemplateEngine("DuckDuckGo", "https://duckduckgo.com/?q={query}")
BING = UrlTemplateEngine("Bing", "https://www.bing.com/search?q={query}")
WIKIPEDIA = UrlTemplateEngine(
    "Wikipedia", "https://en.wikipedia.org/w/index.php?search={query}"
)
GOOGLE_SCHOLAR = UrlTemplateEngine(
    "Google Scholar", "https://scholar.google.com/scholar?q={query}"
)
