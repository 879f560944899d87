"""HTTP fetcher for llms.txt documentation files.

Fetches <base_url>/<filename> for a document kind. Any non-2xx response or
transport error surfaces as NetworkError so the service can fall back to the
disk cache.
"""

import logging

import httpx

from folio.types import BrokenInvariant, DocumentKind, NetworkError

logger = logging.getLogger(__name__)


class DocsFetcher:
    """Fetch raw markdown for a document kind from the docs site."""

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None):
        if not base_url.startswith(("http://", "https://")):
            raise BrokenInvariant(f"Docs base URL must be an http(s) URL, got {base_url!r}")
        self.base_url = base_url.rstrip("/")
        self.client = client

    def url_for(self, kind: DocumentKind) -> str:
        return f"{self.base_url}/{kind.filename}"

    async def fetch(self, kind: DocumentKind) -> str:
        """Fetch the document body.

        Args:
            kind: Which document to fetch

        Returns:
            Raw markdown text

        Raises:
            NetworkError: On non-2xx responses or transport failures
        """
        url = self.url_for(kind)
        logger.info(f"Fetching GET {url}")

        try:
            if self.client is not None:
                response = await self.client.get(url, follow_redirects=True)
            else:
                async with httpx.AsyncClient(follow_redirects=True) as client:
                    response = await client.get(url)
        except httpx.RequestError as e:
            raise NetworkError(kind, f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise NetworkError(kind, f"HTTP {response.status_code}: {response.reason_phrase}")

        return response.text

    async def aclose(self) -> None:
        """Close the injected client, if any."""
        if self.client is not None:
            await self.client.aclose()
