"""FastMCP server implementation for docmark."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from docmark.config import DocmarkConfig
from docmark.engines import engine_names, get_engine
from docmark.errors import DocmarkError
from docmark.ingesters import load_documents
from docmark.passages import extract_at
from docmark.session import MarkSession
from docmark.workspace import Workspace


def create_mcp_server(source: Path, config: DocmarkConfig | None = None) -> FastMCP:
    """Create an MCP server over the documents in ``source``.

    Documents are loaded once at start-up; the server never opens URLs, it
    only hands them back.

    Args:
        source: A text file or a folder of text files
        config: Delimiters to scan for (defaults apply when omitted)

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="docmark",
    )

    workspace = Workspace()
    workspace.add_documents(load_documents(source) or [])
    # URLs are handed back to the client, never opened here
    session = MarkSession(workspace, lambda url: None, config)
    config = session.config

    @mcp.tool()
    def documents() -> str:
        """List the documents that can be scanned.

        Returns:
            One document id per line
        """
        if not workspace.documents:
            return "No documents loaded"
        return "\n".join(sorted(workspace.documents))

    @mcp.tool()
    def passages(document: str) -> str:
        """List every marked passage in a document.

        Args:
            document: Document id (as shown by the documents tool)

        Returns:
            A header, then one line per passage: line number, character
            offset and text
        """
        try:
            report = session.build_report(document)
        except DocmarkError as e:
            return f"Error: {e}"

        if report is None:
            return f"No marked passages in {document}"
        return report.render()

    @mcp.tool()
    def extract(document: str, offset: int) -> str:
        """Return the passage enclosing a character offset.

        Args:
            document: Document id
            offset: Character offset inside the passage

        Returns:
            The passage's inner text, or a not-found notice
        """
        try:
            text = workspace.get_text(document)
        except DocmarkError as e:
            return f"Error: {e}"

        inner = extract_at(text, offset, config.delimiter_left, session.pattern)
        if inner is None:
            return f"No marked passage at offset {offset}"
        return inner

    @mcp.tool()
    def search_url(query: str, engine: str = config.default_engine) -> str:
        """Build a web search URL for a passage.

        Args:
            query: Text to search for
            engine: One of the registered engine names

        Returns:
            The URL, or an error naming the available engines
        """
        if not query:
            return "Error: empty query"
        try:
            return get_engine(engine).build_url(query)
        except DocmarkError as e:
            return f"Error: {e}. Engines: {', '.join(engine_names())}"

    return mcp
