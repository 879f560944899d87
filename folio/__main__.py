"""Folio MCP server.

Usage:
    python -m folio                               # stdio (default)
    python -m folio -t http                       # HTTP on port 8000
    python -m folio -t sse -p 9000
    python -m folio --project-path ~/code/shop    # include project context in full docs
"""

import folio.sentry  # noqa: F401, I001  (must be first)

import argparse
import logging
from pathlib import Path

from fastmcp.utilities.logging import configure_logging

from folio.docs import docs
from folio.project import set_project_context
from folio.settings import folio_settings
from folio.types import ProjectContext

# Configure logging
configure_logging(level="INFO")  # fastmcp logger
configure_logging(level="INFO", logger=logging.getLogger("folio"))  # folio logger


def main():
    """Entry point for `python -m folio`."""
    parser = argparse.ArgumentParser(prog="folio", description="Folio documentation MCP server")
    parser.add_argument(
        "-t",
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport to serve on (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to for http/sse (default: 127.0.0.1)")
    parser.add_argument("-p", "--port", type=int, default=8000, help="Port to bind to for http/sse (default: 8000)")
    parser.add_argument(
        "--project-path",
        default=folio_settings.project_path,
        help="Project path prepended to the full documentation",
    )

    args = parser.parse_args()

    if args.project_path:
        set_project_context(
            ProjectContext(
                project_path=str(Path(args.project_path).expanduser().resolve()),
                tools=folio_settings.project_tools,
            )
        )

    if args.transport == "stdio":
        docs.run()
    else:
        docs.run(transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
