"""Project context for the full documentation variant.

The caller's project path and the tools available to it are prepended to
llms-full.txt so an assistant reading the docs knows where it is working.
Context is process-wide and set once at startup (see folio.__main__).
"""

import logging
from typing import Callable

from folio.settings import folio_settings
from folio.types import ContextUnavailable, ProjectContext

logger = logging.getLogger(__name__)

ProjectContextProvider = Callable[[], ProjectContext]

_project_context: ProjectContext | None = None


def set_project_context(context: ProjectContext | None) -> None:
    """Set (or clear, with None) the process-wide project context."""
    global _project_context
    _project_context = context


def get_project_context() -> ProjectContext:
    """Get the configured project context.

    Falls back to FOLIO_PROJECT_PATH when nothing was set explicitly.

    Raises:
        ContextUnavailable: If no project path has been configured
    """
    if _project_context is not None:
        return _project_context
    if folio_settings.project_path:
        return ProjectContext(
            project_path=folio_settings.project_path,
            tools=folio_settings.project_tools,
        )
    raise ContextUnavailable("Project context has not been initialised")


def build_context_header(context: ProjectContext) -> str:
    """Render the fixed-format header block for a project context."""
    tool_lines = "\n".join(f"- {tool}" for tool in context.tools)
    return f"""
# Current Project Context
Project Path: {context.project_path}

## Available MCP Tools
{tool_lines}

---

"""


def enhance_with_project_context(
    content: str,
    provider: ProjectContextProvider = get_project_context,
) -> str:
    """Prepend the project context header to content.

    Args:
        content: Documentation markdown
        provider: Returns the current ProjectContext or raises ContextUnavailable

    Returns:
        Content with the header prepended, or content unchanged if no
        project context is available
    """
    try:
        context = provider()
    except ContextUnavailable as e:
        logger.debug(f"Serving docs without project context: {e}")
        return content
    return build_context_header(context) + content
