"""Type definitions for Folio.

This module contains:
- Exception hierarchy for structured error handling
- Result types for service return values
- Domain models shared across layers
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Exceptions
# =============================================================================


class FolioError(Exception):
	"""Base for all Folio errors."""

	pass


class BrokenInvariant(FolioError):
	"""Setup/config error - cannot continue (e.g., docs base URL is not http(s))."""

	pass


class TransientError(FolioError):
	"""Temporary failure - retry may succeed (e.g., network timeout)."""

	pass


class NetworkError(TransientError):
	"""Fetching a document from the docs site failed (non-2xx or transport)."""

	def __init__(self, kind: "DocumentKind", message: str):
		self.kind = kind
		self.message = message
		super().__init__(f"Failed to fetch {kind.filename}: {message}")


class DiskCacheError(TransientError):
	"""Reading, writing or decoding a disk cache file failed."""

	pass


class ContextUnavailable(FolioError):
	"""No project context has been configured."""

	pass


# =============================================================================
# Result Types
# =============================================================================

T = TypeVar("T")


@dataclass
class Success(Generic[T]):
	"""Operation returned data successfully."""

	data: T


@dataclass
class NoResults:
	"""Operation executed successfully but found nothing."""

	pass


@dataclass
class Failure:
	"""Best-effort operation failed. Consumed for logging only."""

	error: Exception


# =============================================================================
# Domain Models
# =============================================================================


class DocumentKind(Enum):
	"""Which of the two documentation variants to serve."""

	STANDARD = "standard"
	FULL = "full"

	@property
	def filename(self) -> str:
		"""Canonical remote filename, also the disk cache key."""
		return _FILENAMES[self]


_FILENAMES = {
	DocumentKind.STANDARD: "llms.txt",
	DocumentKind.FULL: "llms-full.txt",
}


class CachedDocument(BaseModel):
	"""A document body plus the time it was fetched.

	Frozen so the memory and disk tiers can never mutate each other's copy.
	"""

	model_config = ConfigDict(frozen=True)

	content: str
	fetched_at: datetime


@dataclass
class Section:
	"""A heading-delimited slice of a markdown document.

	Produced per parse call, never persisted.
	"""

	title: str
	level: int  # 1=h1 .. 6=h6
	body: str  # Heading line plus following lines, each newline-terminated
	start_line: int  # 0-indexed line of the heading
	end_line: int  # 0-indexed, inclusive


class PaginationMetadata(BaseModel):
	"""Navigation metadata. Which fields are set depends on the mode."""

	total_sections: int | None = Field(default=None, ge=0, description="Number of sections in the document")
	current_section: str | None = Field(default=None, description="Title of the returned section")
	total_pages: int | None = Field(default=None, ge=0, description="Number of pages at this page size")
	current_page: int | None = Field(default=None, ge=1, description="1-indexed page returned")
	page_size: int | None = Field(default=None, gt=0, description="Lines per page")


class PaginationResult(BaseModel):
	"""Rendered view of a document plus its navigation metadata."""

	content: str
	metadata: PaginationMetadata = Field(default_factory=PaginationMetadata)


class ProjectContext(BaseModel):
	"""Caller's project, prepended to the full documentation."""

	project_path: str = Field(..., description="Absolute path of the caller's project")
	tools: list[str] = Field(default_factory=list, description="Tool lines listed under 'Available MCP Tools'")
