"""Response schemas of the upstream provider APIs.

Only the fields the adapters read are declared. Result lists hold raw entries
that the adapters validate one by one, so a malformed hit is dropped without
failing its page. Everything else is optional so a degraded response still
validates, and unknown keys are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore")


# Pexels photos: GET https://api.pexels.com/v1/search


class PexelsPhotoSrc(_Upstream):
    original: str | None = None
    large: str | None = None
    medium: str | None = None


class PexelsPhoto(_Upstream):
    id: int | str
    width: int | None = None
    height: int | None = None
    url: str | None = None
    photographer: str | None = None
    alt: str | None = None
    src: PexelsPhotoSrc | None = None


class PexelsPhotoPage(_Upstream):
    photos: list[Any] | None = None


# Unsplash photos: GET https://api.unsplash.com/search/photos


class UnsplashUser(_Upstream):
    name: str | None = None
    username: str | None = None


class UnsplashLinks(_Upstream):
    html: str | None = None
    download: str | None = None
    download_location: str | None = None


class UnsplashUrls(_Upstream):
    raw: str | None = None
    full: str | None = None
    regular: str | None = None
    small: str | None = None


class UnsplashPhoto(_Upstream):
    id: int | str
    width: int | None = None
    height: int | None = None
    description: str | None = None
    alt_description: str | None = None
    user: UnsplashUser | None = None
    links: UnsplashLinks | None = None
    urls: UnsplashUrls | None = None


class UnsplashPhotoPage(_Upstream):
    results: list[Any] | None = None


# Pixabay photos: GET https://pixabay.com/api/


class PixabayPhoto(_Upstream):
    id: int | str
    pageURL: str | None = None
    tags: str | None = None
    webformatURL: str | None = None
    largeImageURL: str | None = None
    fullHDURL: str | None = None
    imageWidth: int | None = None
    imageHeight: int | None = None
    user: str | None = None


class PixabayPhotoPage(_Upstream):
    hits: list[Any] | None = None


# Pexels videos: GET https://api.pexels.com/videos/search


class PexelsVideoFile(_Upstream):
    width: int | None = None
    height: int | None = None
    link: str | None = None


class PexelsVideoUser(_Upstream):
    name: str | None = None


class PexelsVideo(_Upstream):
    id: int | str
    url: str | None = None
    image: str | None = None
    duration: float | None = None
    user: PexelsVideoUser | None = None
    video_files: list[PexelsVideoFile] | None = None


class PexelsVideoPage(_Upstream):
    videos: list[Any] | None = None


# Pixabay videos: GET https://pixabay.com/api/videos/


class PixabayRendition(_Upstream):
    url: str | None = None
    width: int | None = None
    height: int | None = None
    thumbnail: str | None = None


class PixabayRenditions(_Upstream):
    large: PixabayRendition | None = None
    medium: PixabayRendition | None = None
    small: PixabayRendition | None = None
    tiny: PixabayRendition | None = None

    def by_priority(self) -> list[PixabayRendition]:
        """Renditions present in the response, largest first."""
        return [r for r in (self.large, self.medium, self.small, self.tiny) if r is not None]


class PixabayVideo(_Upstream):
    id: int | str
    pageURL: str | None = None
    tags: str | None = None
    duration: float | None = None
    user: str | None = None
    userImageURL: str | None = None
    videos: PixabayRenditions | None = None


class PixabayVideoPage(_Upstream):
    hits: list[Any] | None = None
