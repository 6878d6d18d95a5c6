"""Tests for the search engine registry and dispatcher."""

from __future__ import annotations

import pytest

from docmark.engines import (
    SearchDispatcher,
    UrlTemplateEngine,
    engine_names,
    get_engine,
    register_engine,
    unregister_engine,
)
from docmark.errors import NoEngineSelected, NoQueryError, UnknownEngineError

from tests.helpers import RecordingOpener, ScriptedChooser


class TestRegistry:
    """Engines are an ordered list looked up by name."""

    def test_display_order(self) -> None:
        assert engine_names() == [
            "Google",
            "DuckDuckGo",
            "Bing",
            "Wikipedia",
            "Google Scholar",
        ]

    def test_unknown_engine(self) -> None:
        with pytest.raises(UnknownEngineError):
            get_engine("AltaVista")

    def test_register_appends(self) -> None:
        """Custom engines go to the end of the chooser."""
        custom = UrlTemplateEngine("Local", "http://localhost/?q={query}")
        register_engine(custom)
        try:
            assert engine_names()[-1] == "Local"
            assert get_engine("Local") is custom
        finally:
            unregister_engine("Local")

        assert "Local" not in engine_names()


class TestBuildUrl:
    """URL builders percent-encode the query."""

    def test_google(self) -> None:
        url = get_engine("Google").build_url("foo bar")

        assert "google.com" in url
        assert "foo%20bar" in url

    def test_reserved_characters_encoded(self) -> None:
        url = get_engine("Bing").build_url("a&b=c/d?")

        assert url == "https://www.bing.com/search?q=a%26b%3Dc%2Fd%3F"

    def test_non_ascii(self) -> None:
        url = get_engine("Wikipedia").build_url("café")

        assert url.endswith("search=caf%C3%A9")


class TestSearchDispatcher:
    """The dispatcher opens URLs only when its preconditions hold."""

    def test_search_opens_url(self) -> None:
        opener = RecordingOpener()
        url = SearchDispatcher(opener).search("foo bar", get_engine("Google"))

        assert opener.urls == [url]
        assert url == "https://www.google.com/search?q=foo%20bar"

    @pytest.mark.parametrize("query", ["", None])
    def test_empty_query(self, query: str | None) -> None:
        """No query raises NoQueryError before anything is opened."""
        opener = RecordingOpener()

        with pytest.raises(NoQueryError):
            SearchDispatcher(opener).search(query, get_engine("Google"))

        assert opener.urls == []

    def test_dismissed_chooser(self) -> None:
        opener = RecordingOpener()

        with pytest.raises(NoEngineSelected):
            SearchDispatcher(opener).dispatch("claim", None)

        assert opener.urls == []

    def test_choose_and_search(self) -> None:
        """The chooser sees every engine in order and its answer is used."""
        opener = RecordingOpener()
        chooser = ScriptedChooser("DuckDuckGo")

        url = SearchDispatcher(opener).choose_and_search("claim", chooser)

        assert chooser.offered == [engine_names()]
        assert url == "https://duckduckgo.com/?q=claim"
        assert opener.urls == [url]

    def test_empty_query_skips_chooser(self) -> None:
        opener = RecordingOpener()
        chooser = ScriptedChooser("Google")

        with pytest.raises(NoQueryError):
            SearchDispatcher(opener).choose_and_search("", chooser)

        assert chooser.offered == []
        assert opener.urls == []
