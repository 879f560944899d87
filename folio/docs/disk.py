"""Disk tier of the documentation cache.

One JSON file per document kind, named after the kind's remote filename:

    <cache_dir>/llms.txt.json       {"content": "...", "timestamp": 1735689600000}
    <cache_dir>/llms-full.txt.json

Saves are best-effort and never raise. Loads treat stale files as absent and
delete them. There is no locking or atomic rename; concurrent writers race
and the last one wins.
"""

import asyncio
import logging
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, ValidationError

from folio.docs.cache import DEFAULT_TTL, Clock, from_epoch_ms, is_fresh, to_epoch_ms, utc_now
from folio.types import CachedDocument, DiskCacheError, DocumentKind, Failure, NoResults, Success

logger = logging.getLogger(__name__)


class _DiskRecord(BaseModel):
	"""On-disk JSON schema."""

	content: str
	timestamp: int  # epoch milliseconds


class DiskCache:
	"""Persist cached documents under a directory, one file per kind."""

	def __init__(self, cache_dir: Path, ttl: timedelta = DEFAULT_TTL, clock: Clock = utc_now):
		self.cache_dir = cache_dir
		self.ttl = ttl
		self.clock = clock

	def path_for(self, kind: DocumentKind) -> Path:
		return self.cache_dir / f"{kind.filename}.json"

	async def save(self, kind: DocumentKind, doc: CachedDocument) -> Success[Path] | Failure:
		"""Write a document to disk, creating the cache directory on demand.

		Returns:
		    Success[Path] with the written file, or Failure wrapping the error.
		    Never raises.
		"""
		path = self.path_for(kind)
		record = _DiskRecord(content=doc.content, timestamp=to_epoch_ms(doc.fetched_at))
		try:
			await asyncio.to_thread(self._write, path, record.model_dump_json())
		except OSError as e:
			return Failure(DiskCacheError(f"Failed to write {path}: {e}"))
		return Success(path)

	async def load(self, kind: DocumentKind) -> Success[CachedDocument] | NoResults:
		"""Read a fresh document from disk.

		Returns:
		    Success[CachedDocument] if a fresh copy exists, NoResults if the file
		    is missing or stale (stale files are deleted)

		Raises:
		    DiskCacheError: If the file exists but cannot be read or decoded
		"""
		path = self.path_for(kind)
		try:
			raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
		except FileNotFoundError:
			return NoResults()
		except (OSError, UnicodeDecodeError) as e:
			raise DiskCacheError(f"Failed to read {path}: {e}") from e

		try:
			record = _DiskRecord.model_validate_json(raw)
		except ValidationError as e:
			raise DiskCacheError(f"Malformed cache file {path}: {e.error_count()} errors") from e

		try:
			fetched_at = from_epoch_ms(record.timestamp)
		except (OverflowError, ValueError) as e:
			raise DiskCacheError(f"Invalid timestamp {record.timestamp} in {path}: {e}") from e

		doc = CachedDocument(content=record.content, fetched_at=fetched_at)
		if is_fresh(doc, self.clock(), self.ttl):
			return Success(doc)

		logger.info(f"Disk cache for {kind.filename} is stale, deleting {path}")
		await self._delete(path)
		return NoResults()

	async def _delete(self, path: Path) -> None:
		try:
			await asyncio.to_thread(path.unlink, missing_ok=True)
		except OSError as e:
			# Best-effort
			logger.debug(f"Could not delete stale cache file {path}: {e}")

	@staticmethod
	def _write(path: Path, payload: str) -> None:
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(payload, encoding="utf-8")
