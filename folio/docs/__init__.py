"""Docs: llms.txt documentation served with a tiered cache and navigation.

Docs provides one MCP tool over a site's llms.txt and llms-full.txt:
- get_docs: table of contents, a section by title, or a numbered page

Usage as MCP server:
    from folio.docs import docs
    docs.run()  # stdio transport
    # or
    app = docs.http_app(path="/docs")  # HTTP transport

Usage as library:
    from folio.docs import DocsService
    from folio.types import DocumentKind

    service = DocsService.from_settings()
    toc = await service.serve(DocumentKind.STANDARD)
    page = await service.serve(DocumentKind.FULL, page=2, page_size=1000)
"""

from folio.docs.server import docs
from folio.docs.service import DocsService

__all__ = [
    # Server
    "docs",
    # Service
    "DocsService",
]
