"""Tests for the HTTP fetcher using httpx.MockTransport."""

import httpx
import pytest

from folio.docs.fetcher import DocsFetcher
from folio.types import BrokenInvariant, DocumentKind, NetworkError, TransientError


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_requests_kind_filename():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text="# Docs\n")

    fetcher = DocsFetcher("https://docs.example.com/", client=_client(handler))

    assert await fetcher.fetch(DocumentKind.STANDARD) == "# Docs\n"
    assert await fetcher.fetch(DocumentKind.FULL) == "# Docs\n"
    assert seen == ["https://docs.example.com/llms.txt", "https://docs.example.com/llms-full.txt"]


@pytest.mark.asyncio
async def test_non_2xx_raises_network_error():
    fetcher = DocsFetcher("https://docs.example.com", client=_client(lambda request: httpx.Response(503)))

    with pytest.raises(NetworkError) as exc_info:
        await fetcher.fetch(DocumentKind.FULL)

    assert exc_info.value.kind is DocumentKind.FULL
    assert "HTTP 503" in exc_info.value.message
    assert isinstance(exc_info.value, TransientError)


@pytest.mark.asyncio
async def test_not_found_raises_network_error():
    fetcher = DocsFetcher("https://docs.example.com", client=_client(lambda request: httpx.Response(404)))

    with pytest.raises(NetworkError, match="HTTP 404"):
        await fetcher.fetch(DocumentKind.STANDARD)


@pytest.mark.asyncio
async def test_transport_error_raises_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = DocsFetcher("https://docs.example.com", client=_client(handler))

    with pytest.raises(NetworkError, match="ConnectError"):
        await fetcher.fetch(DocumentKind.STANDARD)


@pytest.mark.asyncio
async def test_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/llms.txt":
            return httpx.Response(301, headers={"location": "https://docs.example.com/v2/llms.txt"})
        return httpx.Response(200, text="# Moved\n")

    fetcher = DocsFetcher("https://docs.example.com", client=_client(handler))

    assert await fetcher.fetch(DocumentKind.STANDARD) == "# Moved\n"


@pytest.mark.parametrize("base_url", ["", "docs.example.com", "ftp://docs.example.com"])
def test_rejects_non_http_base_url(base_url):
    with pytest.raises(BrokenInvariant, match="http"):
        DocsFetcher(base_url)
