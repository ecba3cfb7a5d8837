"""Shared plumbing for the upstream provider adapters."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from stockmedia.exceptions import ConfigurationError, UpstreamError
from stockmedia.models import SearchItem

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=SearchItem)
PageT = TypeVar("PageT", bound=BaseModel)
HitT = TypeVar("HitT", bound=BaseModel)


class ProviderAdapter(ABC, Generic[PageT, ItemT]):
    """Async adapter for one search endpoint of one provider.

    Subclasses declare the endpoint, the credential they need and the schema of
    the response page, and implement the request parameters and the mapping of
    a validated page into normalized items.
    """

    name: str
    label: str
    credential_env: str
    endpoint: str
    page_schema: type[PageT]

    def __init__(self, client: httpx.AsyncClient, api_key: str = ""):
        self.client = client
        self.api_key = api_key

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def require_key(self) -> str:
        """Return the credential or fail with a configuration error."""
        if not self.api_key:
            raise ConfigurationError(self.credential_env)
        return self.api_key

    def _headers(self) -> dict[str, str]:
        """Get request headers; key-in-header providers extend this."""
        return {"Accept": "application/json", "User-Agent": "StockMediaProxy/1.0"}

    @abstractmethod
    def _params(self, query: str, page: int, per_page: int) -> dict[str, Any]:
        """Build the provider-specific query string."""

    @abstractmethod
    def _map(self, page: PageT) -> list[ItemT]:
        """Map a validated response page into normalized items."""

    async def search(self, query: str, page: int = 1, per_page: int = 30) -> list[ItemT]:
        """
        Search the provider and return normalized items.

        Args:
            query: Search terms
            page: 1-based page number, passed through to the provider
            per_page: Page size, passed through to the provider

        Returns:
            Items in provider order

        Raises:
            ConfigurationError: When the provider credential is missing
            UpstreamError: On non-success status, transport failure or unreadable body
        """
        self.require_key()
        data = await self._fetch(self._params(query, page, per_page))
        items = self._map(data)
        logger.info(f"{self.label} returned {len(items)} items for query: {query[:50]}")
        return items

    async def _fetch(self, params: dict[str, Any]) -> PageT:
        logger.debug(f"{self.label} request: {self.endpoint} page={params.get('page')}")
        try:
            response = await self.client.get(self.endpoint, params=params, headers=self._headers())
        except httpx.RequestError as e:
            logger.error(f"Network error connecting to {self.label}: {e}")
            raise UpstreamError(self.label, message=f"{self.label} request failed: {e}") from e

        if not response.is_success:
            logger.error(
                f"{self.label} API error {response.status_code}: {response.text[:500]}"
            )
            raise UpstreamError(self.label, response.status_code)

        try:
            return self.page_schema.model_validate(response.json())
        except (ValueError, SchemaError) as e:
            logger.error(f"{self.label} returned an unreadable body: {e}")
            raise UpstreamError(
                self.label, response.status_code, f"{self.label} returned an invalid response"
            ) from e

    def _parse_hits(self, raw: list[Any] | None, schema: type[HitT]) -> list[HitT]:
        """Validate result entries one at a time, skipping malformed ones."""
        hits = []
        for position, entry in enumerate(raw or []):
            try:
                hits.append(schema.model_validate(entry))
            except SchemaError as e:
                logger.warning(
                    f"{self.label} result {position} skipped: {e.error_count()} invalid field(s)"
                )
        return hits
