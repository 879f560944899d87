"""Folio - llms.txt documentation server for AI coding assistants.

Usage:
    from folio import mcp
    mcp.run()  # stdio transport
    # or
    app = mcp.http_app(path="/")  # HTTP transport (use path="/" when mounting)
"""

from folio.docs import docs as mcp

__all__ = ["mcp"]
