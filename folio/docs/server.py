"""FastMCP server for documentation tools.

This is the edge layer that:
1. Validates and parses MCP tool inputs
2. Calls the document service
3. Formats outputs for MCP
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Literal

import sentry_sdk
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from folio.docs.service import DocsService
from folio.types import DocumentKind, PaginationMetadata

logger = logging.getLogger(__name__)

_service: DocsService | None = None


def get_service() -> DocsService:
    """Get the process-wide service, creating it from settings on first use."""
    global _service
    if _service is None:
        _service = DocsService.from_settings()
    return _service


def set_service(service: DocsService | None) -> None:
    """Replace the process-wide service (tests inject fakes here)."""
    global _service
    _service = service


# ─────────────────────────────────────────────────────────────────────────────
# Lifespan
# ─────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(server):
    """Release HTTP connections when the server shuts down."""
    try:
        yield
    finally:
        if _service is not None:
            await _service.aclose()


# ─────────────────────────────────────────────────────────────────────────────
# FastMCP Server
# ─────────────────────────────────────────────────────────────────────────────

docs = FastMCP(name="docs", lifespan=lifespan)


# ─────────────────────────────────────────────────────────────────────────────
# Tools
# ─────────────────────────────────────────────────────────────────────────────


@docs.tool
async def get_docs(
    type: Annotated[
        Literal["full", "standard"],
        Field(description="The type of documentation to retrieve."),
    ],
    section: Annotated[
        str | None,
        Field(description="Specific section title to retrieve (case-insensitive, partial match supported)"),
    ] = None,
    page: Annotated[
        int | None,
        Field(description="Page number for numeric pagination (starts at 1)"),
    ] = None,
    page_size: Annotated[
        Annotated[int, Field(gt=0)] | None,
        Field(description="Lines per page for numeric pagination (default: 5000)"),
    ] = None,
) -> str:
    """Retrieve documentation with pagination support.

    Call without section/page to get the table of contents. Use "section" for a
    specific section or "page" for numeric pagination.

    Examples:
        - type="standard" - table of contents for llms.txt
        - type="full", section="plugins" - first section whose title contains "plugins"
        - type="full", page=2, page_size=1000 - lines 1001-2000 of llms-full.txt
    """
    try:
        result = await get_service().serve(
            DocumentKind(type),
            section=section,
            page=page,
            page_size=page_size,
        )
    except Exception as e:
        sentry_sdk.capture_exception(e)
        logger.exception(f"get_docs failed: type={type}, section={section}, page={page}")
        raise ToolError(f"Service temporarily unavailable: {e}") from e

    return result.content + _format_pagination_info(result.metadata)


def _format_pagination_info(metadata: PaginationMetadata) -> str:
    """Format metadata as a footer. Empty when no metadata is set."""
    if not metadata.model_dump(exclude_none=True):
        return ""

    lines = ["", "", "---", "**Pagination Info:**"]
    if metadata.total_sections:
        lines.append(f"- Total sections: {metadata.total_sections}")
    if metadata.current_section:
        lines.append(f"- Current section: {metadata.current_section}")
    if metadata.total_pages:
        lines.append(f"- Total pages: {metadata.total_pages}")
    if metadata.current_page:
        lines.append(f"- Current page: {metadata.current_page}/{metadata.total_pages}")
    if metadata.page_size:
        lines.append(f"- Page size: {metadata.page_size} lines")

    return "\n".join(lines) + "\n"
