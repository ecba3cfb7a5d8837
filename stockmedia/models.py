"""Pydantic models for normalized search results and API responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Source = Literal["pexels", "unsplash", "pixabay"]


class ImageSource(BaseModel):
    """Display and full-resolution URLs of an item."""

    model_config = ConfigDict(frozen=True)

    preview: str = ""
    original: str = ""


class SearchItem(BaseModel):
    """Normalized photo result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    source: Source
    width: int = 0
    height: int = 0
    author: str = ""
    alt: str = ""
    page_url: str | None = Field(default=None, alias="pageUrl")
    download_url: str | None = Field(default=None, alias="downloadUrl")
    src: ImageSource = Field(default_factory=ImageSource)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def identity(self) -> tuple[str, str, str]:
        """Key under which two results count as the same item."""
        return (self.source, self.id, self.src.original)

    @property
    def displayable(self) -> bool:
        return bool(self.src.preview and self.src.original)


class VideoItem(SearchItem):
    """Normalized video result; ``src`` holds the poster image."""

    duration: float | None = None
    video_url: str = Field(alias="videoUrl")


class SearchResponse(BaseModel):
    """Photo search response data."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[SearchItem] = Field(default_factory=list)
    page: int
    per_page: int = Field(alias="perPage")
    errors: list[str] = Field(default_factory=list)


class VideoSearchResponse(BaseModel):
    """Video search response data."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[VideoItem] = Field(default_factory=list)
    page: int
    per_page: int = Field(alias="perPage")
    errors: list[str] = Field(default_factory=list)


class BaseUrlResponse(BaseModel):
    """Static configuration echo for the front-end."""

    BASE_URL: str | None = None
