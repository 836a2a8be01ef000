"""
Gift idea search backed by the Exa search API.

This is a stateless passthrough: the query is forwarded to Exa and the
raw JSON answer is wrapped as ``{"result": ...}``.  Missing
credentials and upstream failures are reported with the same error
envelope the list service uses.  Network errors are not retried.
"""

import logging
from typing import Optional

import httpx

from gift_list_api.app.core.config import Settings
from gift_list_api.app.services.gift_list_service import ServiceResult

logger = logging.getLogger(__name__)


class SearchService:
    """Forward gift idea queries to Exa."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.exa.ai",
        num_results: int = 3,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.num_results = num_results
        self.timeout = timeout
        # Tests inject an ``httpx.MockTransport`` here.
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "SearchService":
        return cls(
            settings.exa_api_key,
            base_url=settings.exa_base_url,
            num_results=settings.search_num_results,
            timeout=settings.search_timeout,
        )

    async def search(self, query: str) -> ServiceResult:
        """Run ``query`` against Exa and return the wrapped response."""
        if not self.api_key:
            logger.error("Search requested but no Exa API key is configured")
            return ServiceResult(500, {"error": "Missing API key"})

        headers = {"x-api-key": self.api_key, "Content-Type": "application/json"}
        payload = {"query": query, "numResults": self.num_results}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(f"{self.base_url}/search", headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Search for %r failed: %s", query, exc)
            return ServiceResult(500, {"error": "Search failed", "details": str(exc)})

        logger.debug("Search for %r returned %d bytes", query, len(response.content))
        return ServiceResult(200, {"result": data})
