"""Pexels photo and video search adapters."""

from typing import Any

from stockmedia.models import ImageSource, SearchItem, VideoItem
from stockmedia.providers.base import ProviderAdapter
from stockmedia.providers.schemas import (
    PexelsPhoto,
    PexelsPhotoPage,
    PexelsVideo,
    PexelsVideoFile,
    PexelsVideoPage,
)
from stockmedia.utils import first_non_empty

PEXELS_BASE_URL = "https://api.pexels.com"


class _PexelsAdapter(ProviderAdapter):
    name = "pexels"
    label = "Pexels"
    credential_env = "PEXELS_API_KEY"

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "Authorization": self.api_key}

    def _params(self, query: str, page: int, per_page: int) -> dict[str, Any]:
        return {"query": query, "page": page, "per_page": per_page}


class PexelsPhotos(_PexelsAdapter):
    """Pexels photo search."""

    endpoint = f"{PEXELS_BASE_URL}/v1/search"
    page_schema = PexelsPhotoPage

    def _map(self, page: PexelsPhotoPage) -> list[SearchItem]:
        items = []
        for photo in self._parse_hits(page.photos, PexelsPhoto):
            src = photo.src
            original = src.original if src else None
            items.append(
                SearchItem(
                    id=str(photo.id),
                    source="pexels",
                    width=photo.width or 0,
                    height=photo.height or 0,
                    author=photo.photographer or "",
                    alt=photo.alt or "",
                    page_url=photo.url,
                    download_url=original,
                    src=ImageSource(
                        preview=(first_non_empty(src.large, src.medium) if src else None) or "",
                        original=original or "",
                    ),
                )
            )
        return items


def best_rendition(files: list[PexelsVideoFile] | None) -> PexelsVideoFile | None:
    """Pick the rendition with the largest pixel area; first wins on ties."""
    candidates = [f for f in files or [] if f.width and f.height and f.link]
    if not candidates:
        return None
    return max(candidates, key=lambda f: f.width * f.height)


class PexelsVideos(_PexelsAdapter):
    """Pexels video search."""

    endpoint = f"{PEXELS_BASE_URL}/videos/search"
    page_schema = PexelsVideoPage

    def _map(self, page: PexelsVideoPage) -> list[VideoItem]:
        items = []
        for video in self._parse_hits(page.videos, PexelsVideo):
            item = self._map_video(video)
            if item is not None:
                items.append(item)
        return items

    @staticmethod
    def _map_video(video: PexelsVideo) -> VideoItem | None:
        best = best_rendition(video.video_files)
        if best is None:
            return None
        poster = video.image or ""
        return VideoItem(
            id=str(video.id),
            source="pexels",
            width=best.width,
            height=best.height,
            duration=video.duration or None,
            author=first_non_empty(video.user.name if video.user else None) or "Pexels",
            alt="Video",
            page_url=video.url,
            video_url=best.link,
            download_url=best.link,
            src=ImageSource(preview=poster, original=poster),
        )
