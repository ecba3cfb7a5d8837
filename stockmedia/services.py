"""Search orchestration across the stock media providers."""

import asyncio
import logging
from typing import Any, Sequence

from stockmedia.exceptions import ValidationError
from stockmedia.models import SearchItem, SearchResponse, VideoItem, VideoSearchResponse
from stockmedia.providers import ProviderAdapter
from stockmedia.ranking import merge_items

logger = logging.getLogger(__name__)

ALL_SOURCES = "all"
DEFAULT_SOURCE = "pexels"

PHOTO_PER_PAGE = (10, 80, 30)  # min, max, default
VIDEO_PER_PAGE = (5, 40, 20)
DEFAULT_VIDEO_QUERY = "city"


def parse_int(value: Any, default: int) -> int:
    """Parse a query-string integer, falling back to ``default``."""
    if value is None or value == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def normalize_page(value: Any) -> int:
    return max(1, parse_int(value, 1))


def normalize_per_page(value: Any, bounds: tuple[int, int, int]) -> int:
    low, high, default = bounds
    return min(high, max(low, parse_int(value, default)))


def normalize_source(value: str | None) -> str:
    return (value or DEFAULT_SOURCE).strip().lower() or DEFAULT_SOURCE


async def fan_out(
    adapters: Sequence[ProviderAdapter], query: str, page: int, per_page: int
) -> tuple[list[SearchItem], list[str]]:
    """
    Query adapters concurrently and wait for all of them to settle.

    A failing adapter never cancels its siblings: its message is collected and
    the other results are still returned.

    Returns:
        Tuple of (items in adapter order, error messages in adapter order)
    """
    results = await asyncio.gather(
        *(adapter.search(query, page, per_page) for adapter in adapters),
        return_exceptions=True,
    )

    items: list[SearchItem] = []
    errors: list[str] = []
    for adapter, result in zip(adapters, results):
        if isinstance(result, Exception):
            logger.warning(f"Provider {adapter.name} failed: {result}")
            errors.append(str(result) or f"{adapter.label} failed")
            continue
        if isinstance(result, BaseException):
            raise result
        items.extend(result)
    return items, errors


class MediaSearchService:
    """Validates search parameters and dispatches to the provider adapters."""

    def __init__(
        self,
        photo_adapters: dict[str, ProviderAdapter],
        video_adapters: dict[str, ProviderAdapter],
    ):
        self.photo_adapters = photo_adapters
        self.video_adapters = video_adapters

    async def search_photos(
        self,
        query: str | None,
        source: str | None = None,
        page: Any = None,
        per_page: Any = None,
    ) -> SearchResponse:
        """
        Search photos in one provider or in all of them.

        Single-source failures propagate to the caller. In ``all`` mode each
        provider failure becomes an entry of ``errors``.

        Raises:
            ValidationError: On a missing query or an unknown source
            ConfigurationError: When the selected provider has no credential
            UpstreamError: When the selected provider fails
        """
        q = (query or "").strip()
        source_name = normalize_source(source)
        page_no = normalize_page(page)
        size = normalize_per_page(per_page, PHOTO_PER_PAGE)

        if not q:
            raise ValidationError("Missing query parameter 'q'")

        errors: list[str] = []
        if source_name == ALL_SOURCES:
            items, errors = await fan_out(list(self.photo_adapters.values()), q, page_no, size)
        elif source_name in self.photo_adapters:
            items = await self.photo_adapters[source_name].search(q, page_no, size)
        else:
            raise ValidationError(f"Invalid source '{source_name}'")

        merged = merge_items(items)
        logger.info(
            f"Photo search '{q[:50]}' source={source_name} returned {len(merged)} items, "
            f"{len(errors)} errors"
        )
        return SearchResponse(items=merged, page=page_no, per_page=size, errors=errors)

    async def search_videos(
        self,
        query: str | None,
        source: str | None = None,
        page: Any = None,
        per_page: Any = None,
    ) -> VideoSearchResponse:
        """
        Search videos in one provider or in all of them.

        Providers without a credential are skipped silently, and provider
        failures are always reported through ``errors``. An unknown source
        selects no provider.
        """
        q = (query or "").strip() or DEFAULT_VIDEO_QUERY
        source_name = normalize_source(source)
        page_no = normalize_page(page)
        size = normalize_per_page(per_page, VIDEO_PER_PAGE)

        selected = []
        for name, adapter in self.video_adapters.items():
            if source_name not in (name, ALL_SOURCES):
                continue
            if not adapter.configured:
                logger.debug(f"Video provider {name} not configured, skipping")
                continue
            selected.append(adapter)

        items, errors = await fan_out(selected, q, page_no, size)
        merged: list[VideoItem] = merge_items(items)
        logger.info(
            f"Video search '{q[:50]}' source={source_name} returned {len(merged)} items, "
            f"{len(errors)} errors"
        )
        return VideoSearchResponse(items=merged, page=page_no, per_page=size, errors=errors)
