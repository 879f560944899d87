"""Shared test fixtures: fake clock, fake fetcher, and a service wired to tmp_path.

No network or real cache directory is touched; the disk tier writes under
pytest's tmp_path and the network tier is an AsyncMock.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from folio.docs.cache import MemoryCache
from folio.docs.disk import DiskCache
from folio.docs.fetcher import DocsFetcher
from folio.docs.service import DocsService
from folio.project import set_project_context
from folio.types import ContextUnavailable, ProjectContext

TTL = timedelta(hours=24)
SAMPLE_DOC = "# A\nx\n## B\ny\n"


class FakeClock:
	"""Manually advanced clock."""

	def __init__(self, start: datetime | None = None):
		self.now = start or datetime(2025, 1, 1, tzinfo=UTC)

	def __call__(self) -> datetime:
		return self.now

	def advance(self, delta: timedelta) -> None:
		self.now += delta


def no_context() -> ProjectContext:
	raise ContextUnavailable("no project")


@pytest.fixture(autouse=True)
def _reset_project_context():
	"""Keep process-wide project context from leaking between tests."""
	set_project_context(None)
	yield
	set_project_context(None)


@pytest.fixture
def clock() -> FakeClock:
	return FakeClock()


@pytest.fixture
def fetcher() -> AsyncMock:
	mock = AsyncMock(spec=DocsFetcher)
	mock.fetch.return_value = SAMPLE_DOC
	return mock


@pytest.fixture
def disk(tmp_path, clock) -> DiskCache:
	return DiskCache(tmp_path / "cache", ttl=TTL, clock=clock)


@pytest.fixture
def memory() -> MemoryCache:
	return MemoryCache()


@pytest.fixture
def service(fetcher, disk, memory, clock) -> DocsService:
	return DocsService(
		fetcher=fetcher,
		disk=disk,
		memory=memory,
		ttl=TTL,
		clock=clock,
		context_provider=no_context,
	)
