"""Unsplash photo search adapter."""

from typing import Any

from stockmedia.models import ImageSource, SearchItem
from stockmedia.providers.base import ProviderAdapter
from stockmedia.providers.schemas import UnsplashLinks, UnsplashPhoto, UnsplashPhotoPage, UnsplashUrls
from stockmedia.utils import first_non_empty

UNSPLASH_BASE_URL = "https://api.unsplash.com"


class UnsplashPhotos(ProviderAdapter):
    """Unsplash photo search.

    Unsplash requires downloads to be reported through ``download_location``;
    the download URL handed to clients points there, signed with the access key.
    """

    name = "unsplash"
    label = "Unsplash"
    credential_env = "UNSPLASH_ACCESS_KEY"
    endpoint = f"{UNSPLASH_BASE_URL}/search/photos"
    page_schema = UnsplashPhotoPage

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "Authorization": f"Client-ID {self.api_key}"}

    def _params(self, query: str, page: int, per_page: int) -> dict[str, Any]:
        return {"query": query, "page": page, "per_page": per_page}

    def _map(self, page: UnsplashPhotoPage) -> list[SearchItem]:
        return [self._map_photo(photo) for photo in self._parse_hits(page.results, UnsplashPhoto)]

    def _download_url(self, links: UnsplashLinks, urls: UnsplashUrls) -> str | None:
        if links.download_location:
            return f"{links.download_location}&client_id={self.api_key}"
        return first_non_empty(links.download, urls.full)

    def _map_photo(self, photo: UnsplashPhoto) -> SearchItem:
        links = photo.links or UnsplashLinks()
        urls = photo.urls or UnsplashUrls()
        user = photo.user
        return SearchItem(
            id=str(photo.id),
            source="unsplash",
            width=photo.width or 0,
            height=photo.height or 0,
            author=(first_non_empty(user.name, user.username) if user else None) or "",
            alt=first_non_empty(photo.alt_description, photo.description) or "",
            page_url=links.html,
            download_url=self._download_url(links, urls),
            src=ImageSource(
                preview=first_non_empty(urls.regular, urls.small) or "",
                original=first_non_empty(urls.full, urls.raw) or "",
            ),
        )
