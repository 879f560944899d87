"""Cache freshness policy and the in-process memory tier.

Freshness is a pure function of (document, now, ttl) so tests can drive it
with a fake clock. The memory tier is a plain keyed store with get/set; the
service owns the policy and decides when an entry is usable.
"""

from datetime import UTC, datetime, timedelta
from typing import Callable, Protocol

from folio.types import CachedDocument, DocumentKind

DEFAULT_TTL = timedelta(hours=24)
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
	"""Default clock."""
	return datetime.now(UTC)


def is_fresh(doc: CachedDocument, now: datetime, ttl: timedelta = DEFAULT_TTL) -> bool:
	"""Check whether a cached document is still within its TTL.

	A document is stale once now - fetched_at >= ttl.
	"""
	return now - doc.fetched_at < ttl


def to_epoch_ms(moment: datetime) -> int:
	"""Convert an aware datetime to integer epoch milliseconds."""
	return (moment - EPOCH) // timedelta(milliseconds=1)


def from_epoch_ms(value: int) -> datetime:
	"""Convert integer epoch milliseconds to an aware UTC datetime."""
	return EPOCH + timedelta(milliseconds=value)


class DocumentStore(Protocol):
	"""Keyed get/set store for cached documents."""

	def get(self, kind: DocumentKind) -> CachedDocument | None: ...

	def set(self, kind: DocumentKind, doc: CachedDocument) -> None: ...


class MemoryCache:
	"""In-process cache holding one document per kind."""

	def __init__(self) -> None:
		self._entries: dict[DocumentKind, CachedDocument] = {}

	def get(self, kind: DocumentKind) -> CachedDocument | None:
		return self._entries.get(kind)

	def set(self, kind: DocumentKind, doc: CachedDocument) -> None:
		self._entries[kind] = doc

	def clear(self) -> None:
		self._entries.clear()
