"""Stock media provider adapters."""

import httpx

from stockmedia.config import Settings
from stockmedia.providers.base import ProviderAdapter
from stockmedia.providers.pexels import PexelsPhotos, PexelsVideos
from stockmedia.providers.pixabay import PixabayPhotos, PixabayVideos
from stockmedia.providers.unsplash import UnsplashPhotos


def build_photo_adapters(client: httpx.AsyncClient, settings: Settings) -> dict[str, ProviderAdapter]:
    """Photo adapters keyed by source name, in merge order."""
    return {
        "pexels": PexelsPhotos(client, settings.pexels_api_key),
        "unsplash": UnsplashPhotos(client, settings.unsplash_access_key),
        "pixabay": PixabayPhotos(client, settings.pixabay_api_key),
    }


def build_video_adapters(client: httpx.AsyncClient, settings: Settings) -> dict[str, ProviderAdapter]:
    """Video adapters keyed by source name, in merge order."""
    return {
        "pexels": PexelsVideos(client, settings.pexels_api_key),
        "pixabay": PixabayVideos(client, settings.pixabay_api_key),
    }


__all__ = [
    "ProviderAdapter",
    "PexelsPhotos",
    "PexelsVideos",
    "PixabayPhotos",
    "PixabayVideos",
    "UnsplashPhotos",
    "build_photo_adapters",
    "build_video_adapters",
]
