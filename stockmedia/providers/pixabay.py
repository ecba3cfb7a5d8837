"""Pixabay photo and video search adapters.

Pixabay authenticates with a ``key`` query parameter rather than a header.
"""

from typing import Any

from stockmedia.models import ImageSource, SearchItem, VideoItem
from stockmedia.providers.base import ProviderAdapter
from stockmedia.providers.schemas import (
    PixabayPhoto,
    PixabayPhotoPage,
    PixabayRenditions,
    PixabayVideo,
    PixabayVideoPage,
)
from stockmedia.utils import first_non_empty

PIXABAY_BASE_URL = "https://pixabay.com/api"


class _PixabayAdapter(ProviderAdapter):
    name = "pixabay"
    label = "Pixabay"
    credential_env = "PIXABAY_API_KEY"

    def _params(self, query: str, page: int, per_page: int) -> dict[str, Any]:
        return {
            "key": self.api_key,
            "q": query,
            "page": page,
            "per_page": per_page,
            "safesearch": "true",
        }


class PixabayPhotos(_PixabayAdapter):
    """Pixabay photo search."""

    endpoint = f"{PIXABAY_BASE_URL}/"
    page_schema = PixabayPhotoPage

    def _params(self, query: str, page: int, per_page: int) -> dict[str, Any]:
        return {**super()._params(query, page, per_page), "image_type": "photo"}

    def _map(self, page: PixabayPhotoPage) -> list[SearchItem]:
        items = []
        for hit in self._parse_hits(page.hits, PixabayPhoto):
            original = first_non_empty(hit.largeImageURL, hit.fullHDURL, hit.webformatURL)
            items.append(
                SearchItem(
                    id=str(hit.id),
                    source="pixabay",
                    width=hit.imageWidth or 0,
                    height=hit.imageHeight or 0,
                    author=hit.user or "",
                    alt=hit.tags or "",
                    page_url=hit.pageURL,
                    download_url=original,
                    src=ImageSource(preview=hit.webformatURL or "", original=original or ""),
                )
            )
        return items


def poster_url(video: PixabayVideo) -> str:
    renditions = video.videos or PixabayRenditions()
    thumbs = [r.thumbnail for r in renditions.by_priority()]
    return first_non_empty(*thumbs, video.userImageURL) or ""


class PixabayVideos(_PixabayAdapter):
    """Pixabay video search."""

    endpoint = f"{PIXABAY_BASE_URL}/videos/"
    page_schema = PixabayVideoPage

    def _map(self, page: PixabayVideoPage) -> list[VideoItem]:
        """
        Map video hits, using the first rendition that has a URL.

        Renditions are tried in the order large, medium, small, tiny; sizes are
        not compared. Hits with no playable rendition are dropped. The poster is
        the thumbnail of the first rendition that has one, else the uploader's
        avatar.
        """
        items = []
        for hit in self._parse_hits(page.hits, PixabayVideo):
            renditions = hit.videos or PixabayRenditions()
            best = next((r for r in renditions.by_priority() if r.url), None)
            if best is None:
                continue
            poster = poster_url(hit)
            items.append(
                VideoItem(
                    id=str(hit.id),
                    source="pixabay",
                    width=best.width or 0,
                    height=best.height or 0,
                    duration=hit.duration or None,
                    author=hit.user or "Pixabay",
                    alt=f"Video: {hit.tags}" if hit.tags else "Video",
                    page_url=hit.pageURL or None,
                    video_url=best.url,
                    download_url=best.url,
                    src=ImageSource(preview=poster, original=poster),
                )
            )
        return items
