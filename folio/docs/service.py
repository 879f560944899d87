"""Document service: resolve documentation through a tiered cache and serve
navigation views over it.

Resolution chain, first success wins:
1. Memory cache, if fresh
2. Network fetch (written through to memory, best-effort to disk)
3. Disk cache, if fresh (copied into memory)
4. Bundled fallback text (never cached)

The full variant gets the project context header prepended before it is
cached, and also when the fallback is served. Refresh is lazy: a stale entry
is only replaced when someone asks for it.
"""

import asyncio
import logging
from datetime import timedelta

import httpx

from folio.docs.cache import Clock, DocumentStore, MemoryCache, is_fresh, utc_now
from folio.docs.disk import DiskCache
from folio.docs.fallback import fallback_content
from folio.docs.fetcher import DocsFetcher
from folio.docs.navigator import find_section, get_page, table_of_contents
from folio.paths import get_cache_dir
from folio.project import ProjectContextProvider, enhance_with_project_context, get_project_context
from folio.settings import FolioSettings, folio_settings
from folio.types import (
	CachedDocument,
	DiskCacheError,
	DocumentKind,
	Failure,
	NetworkError,
	PaginationResult,
	Success,
)

logger = logging.getLogger(__name__)


class DocsService:
	"""Serve llms.txt documents with caching and navigation."""

	def __init__(
		self,
		fetcher: DocsFetcher,
		disk: DiskCache,
		memory: DocumentStore | None = None,
		ttl: timedelta = timedelta(hours=24),
		clock: Clock = utc_now,
		context_provider: ProjectContextProvider = get_project_context,
		default_page_size: int = folio_settings.default_page_size,
	):
		self.fetcher = fetcher
		self.disk = disk
		self.memory = memory if memory is not None else MemoryCache()
		self.ttl = ttl
		self.clock = clock
		self.context_provider = context_provider
		self.default_page_size = default_page_size
		# Single-flight: concurrent resolves of the same kind share one task
		self._inflight: dict[DocumentKind, asyncio.Task[str]] = {}

	@classmethod
	def from_settings(
		cls,
		settings: FolioSettings = folio_settings,
		client: httpx.AsyncClient | None = None,
	) -> "DocsService":
		"""Build a service wired from FOLIO_* settings."""
		ttl = timedelta(hours=settings.cache_ttl_hours)
		return cls(
			fetcher=DocsFetcher(settings.docs_base_url, client=client),
			disk=DiskCache(get_cache_dir(settings.cache_dir), ttl=ttl),
			ttl=ttl,
			default_page_size=settings.default_page_size,
		)

	async def serve(
		self,
		kind: DocumentKind,
		section: str | None = None,
		page: int | None = None,
		page_size: int | None = None,
	) -> PaginationResult:
		"""Resolve a document and render the requested view.

		Args:
		    kind: Which document to serve
		    section: Partial section title; takes precedence over page
		    page: 1-indexed page number for numeric pagination
		    page_size: Lines per page (default 5000)

		Returns:
		    PaginationResult; the table of contents when neither section nor
		    page is given
		"""
		content = await self.resolve(kind)

		if section:
			return find_section(content, section)
		if page is not None:
			return get_page(content, page, page_size if page_size is not None else self.default_page_size)
		return table_of_contents(content)

	async def resolve(self, kind: DocumentKind) -> str:
		"""Get the current content for a document kind. Never fails."""
		cached = self.memory.get(kind)
		if cached is not None and is_fresh(cached, self.clock(), self.ttl):
			logger.debug(f"Memory cache hit for {kind.filename}")
			return cached.content

		task = self._inflight.get(kind)
		if task is None:
			task = asyncio.create_task(self._refresh(kind))
			self._inflight[kind] = task
			task.add_done_callback(lambda _: self._inflight.pop(kind, None))
		return await asyncio.shield(task)

	async def _refresh(self, kind: DocumentKind) -> str:
		try:
			content = await self.fetcher.fetch(kind)
		except NetworkError as e:
			logger.warning(f"{e}; trying disk cache")
		else:
			return await self._store_fetched(kind, content)

		try:
			match await self.disk.load(kind):
				case Success(doc):
					logger.info(f"Serving {kind.filename} from disk cache")
					self.memory.set(kind, doc)
					return doc.content
		except DiskCacheError as e:
			logger.warning(f"Failed to load {kind.filename} from disk cache: {e}")

		logger.warning(f"Using fallback content for {kind.filename}")
		return self._enhance(kind, fallback_content(kind))

	async def _store_fetched(self, kind: DocumentKind, content: str) -> str:
		content = self._enhance(kind, content)
		doc = CachedDocument(content=content, fetched_at=self.clock())
		self.memory.set(kind, doc)

		match await self.disk.save(kind, doc):
			case Failure(error):
				logger.warning(f"Failed to save {kind.filename} to disk cache: {error}")
			case Success(path):
				logger.debug(f"Saved {kind.filename} to {path}")

		return content

	def _enhance(self, kind: DocumentKind, content: str) -> str:
		if kind is DocumentKind.FULL:
			return enhance_with_project_context(content, self.context_provider)
		return content

	async def aclose(self) -> None:
		await self.fetcher.aclose()
