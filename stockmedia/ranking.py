"""Merge results from several providers into one ranked list."""

import logging
from typing import Iterable, TypeVar

from stockmedia.models import SearchItem

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=SearchItem)


def merge_items(items: Iterable[ItemT]) -> list[ItemT]:
    """
    Filter, deduplicate and rank normalized items.

    - Items missing ``src.preview`` or ``src.original`` are dropped.
    - The first item per ``(source, id, src.original)`` is kept.
    - The rest is sorted by descending pixel area; ``sorted`` is stable so
      equal areas keep their input order.

    The result is never truncated; pagination belongs to the providers.
    """
    seen: set[tuple[str, str, str]] = set()
    unique: list[ItemT] = []
    dropped = 0
    for item in items:
        if not item.displayable:
            dropped += 1
            continue
        key = item.identity
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)

    if dropped:
        logger.debug(f"Dropped {dropped} items without preview or original URL")

    return sorted(unique, key=lambda item: item.area, reverse=True)
