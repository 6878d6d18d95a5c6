"""CLI entry point for docmark."""

import argparse
import json
import logging
import sys
from pathlib import Path

from docmark.commands import Commands
from docmark.config import DocmarkConfig
from docmark.engines import engine_names
from docmark.errors import ConfigurationError
from docmark.ingesters import load_documents
from docmark.models import Document
from docmark.session import MarkSession
from docmark.workspace import Workspace, open_in_browser

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def load_config(left: str | None, right: str | None) -> DocmarkConfig:
    """Environment configuration, with command-line delimiters on top."""
    try:
        config = DocmarkConfig.from_env()
        if left is not None or right is not None:
            config = config.with_delimiters(
                config.delimiter_left if left is None else left,
                config.delimiter_right if right is None else right,
            )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    return config


def load(source: str) -> list[Document]:
    """Load documents from a file or folder, exiting on failure."""
    documents = load_documents(source)
    if documents is None:
        logger.error(f"Cannot read: {source}")
        logger.error("Supported inputs: text files, folders")
        sys.exit(1)
    if not documents:
        logger.error(f"No text documents in {source}")
        sys.exit(1)
    return documents


def pick_document(documents: list[Document], doc_id: str | None) -> Document:
    """Choose the document a point command applies to."""
    if doc_id is None:
        if len(documents) == 1:
            return documents[0]
        logger.error("Several documents loaded; choose one with --doc")
        sys.exit(1)
    for doc in documents:
        if doc.doc_id == doc_id:
            return doc
    logger.error(f"Document not found: {doc_id}")
    sys.exit(1)


def scan(source: str, config: DocmarkConfig, as_json: bool = False) -> None:
    """Print a passage listing for every document in a source.

    Args:
        source: Path to a text file or folder
        config: Delimiters to scan for
        as_json: Emit one JSON array of entries instead of listings
    """
    workspace = Workspace()
    workspace.add_documents(load(source))
    session = MarkSession(workspace, workspace.open_url, config)

    found = []
    for doc_id in workspace.documents:
        report = session.build_report(doc_id)
        if report is None:
            logger.debug(f"No marked passages found in {doc_id}")
            continue
        found.append(report)

    if as_json:
        print(json.dumps([e for r in found for e in r.to_dicts()], indent=2))
        return

    if not found:
        logger.info("No marked passages found")
        return

    for report in found:
        print(report.render())
        print()


def extract(
    source: str, offset: int, config: DocmarkConfig, doc_id: str | None = None
) -> None:
    """Print the passage enclosing a character offset."""
    doc = pick_document(load(source), doc_id)
    workspace = Workspace()
    workspace.add_document(doc)
    session = MarkSession(workspace, workspace.open_url, config)

    view = workspace.open_view(doc.doc_id)
    workspace.set_cursor(view, offset)
    inner = session.passage_at(view)
    if inner is None:
        logger.error(f"No marked passage at offset {offset} in {doc.doc_id}")
        sys.exit(1)
    print(inner)


def search(
    source: str,
    offset: int,
    engine: str,
    config: DocmarkConfig,
    doc_id: str | None = None,
    print_only: bool = False,
) -> None:
    """Search the web for the passage at a character offset.

    Args:
        source: Path to a text file or folder
        offset: Character offset inside the passage
        engine: Engine name (the non-interactive chooser's answer)
        config: Delimiters to scan for
        doc_id: Document to use when ``source`` is a folder
        print_only: Print the URL instead of opening a browser
    """
    doc = pick_document(load(source), doc_id)
    workspace = Workspace(
        open_url=discard_url if print_only else open_in_browser,
        choose=lambda labels: engine,
    )
    workspace.add_document(doc)
    session = MarkSession(workspace, workspace.open_url, config)
    commands = Commands(session, workspace.choose)

    view = workspace.open_view(doc.doc_id)
    workspace.set_cursor(view, offset)
    url = commands.search_at_point()
    if url is None:
        logger.error(workspace.messages[-1])
        sys.exit(1)
    if print_only:
        print(url)
    else:
        logger.info(f"Opened {url}")


def discard_url(url: str) -> None:
    """URL opener for --print; the caller prints the URL instead."""


def list_engines() -> None:
    """Print the registered search engines in chooser order."""
    for name in engine_names():
        print(name)


def deck(source: str, config: DocmarkConfig) -> None:
    """Launch the Mark Deck TUI on a source."""
    documents = load(source)

    from docmark.deck import main as deck_main

    deck_main(documents, config)


def serve(source: str, config: DocmarkConfig, transport: str = "stdio") -> None:
    """Start MCP server for a file or folder.

    Args:
        source: Path to a text file or folder
        config: Delimiters to scan for
        transport: Transport protocol (stdio or sse)
    """
    if not Path(source).exists():
        logger.error(f"Source not found: {source}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from docmark.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {source} via {transport}")
    mcp = create_mcp_server(Path(source), config)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    delimiters = argparse.ArgumentParser(add_help=False)
    delimiters.add_argument("--left", help="Left delimiter (default: <<)")
    delimiters.add_argument("--right", help="Right delimiter (default: >>)")
    delimiters.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )

    parser = argparse.ArgumentParser(
        prog="docmark",
        description="docmark - find, highlight and look up marked passages",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # scan command
    scan_parser = subparsers.add_parser(
        "scan",
        parents=[delimiters],
        help="List every marked passage in a file or folder",
    )
    scan_parser.add_argument("source", help="Text file or folder path")
    scan_parser.add_argument(
        "--json", action="store_true", help="Print entries as JSON"
    )

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        parents=[delimiters],
        help="Print the passage at a character offset",
    )
    extract_parser.add_argument("source", help="Text file or folder path")
    extract_parser.add_argument("--offset", type=int, required=True)
    extract_parser.add_argument("--doc", help="Document id (for folders)")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        parents=[delimiters],
        help="Search the web for the passage at a character offset",
    )
    search_parser.add_argument("source", help="Text file or folder path")
    search_parser.add_argument("--offset", type=int, required=True)
    search_parser.add_argument("--doc", help="Document id (for folders)")
    search_parser.add_argument(
        "--engine",
        default=None,
        help="Search engine name (default: $DOCMARK_DEFAULT_ENGINE or Google)",
    )
    search_parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the URL instead of opening it",
    )

    # engines command
    subparsers.add_parser("engines", help="List available search engines")

    # deck command
    deck_parser = subparsers.add_parser(
        "deck",
        parents=[delimiters],
        help="Launch Mark Deck TUI on a file or folder",
    )
    deck_parser.add_argument("source", help="Text file or folder path")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        parents=[delimiters],
        help="Start MCP server for a file or folder",
    )
    serve_parser.add_argument("source", help="Text file or folder path")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    args = parser.parse_args(argv)

    if args.command == "engines":
        list_engines()
        return

    if args.verbose:
        logging.getLogger("docmark").setLevel(logging.DEBUG)
    config = load_config(args.left, args.right)

    if args.command == "scan":
        scan(args.source, config, as_json=args.json)
    elif args.command == "extract":
        extract(args.source, args.offset, config, doc_id=args.doc)
    elif args.command == "search":
        engine = args.engine or config.default_engine
        search(
            args.source,
            args.offset,
            engine,
            config,
            doc_id=args.doc,
            print_only=args.print_only,
        )
    elif args.command == "deck":
        deck(args.source, config)
    elif args.command == "serve":
        serve(args.source, config, args.transport)


if __name__ == "__main__":
    main()
