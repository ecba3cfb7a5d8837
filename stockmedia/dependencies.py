"""FastAPI dependencies."""

import httpx
from fastapi import Request

from stockmedia.config import Settings
from stockmedia.providers import build_photo_adapters, build_video_adapters
from stockmedia.services import MediaSearchService


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared upstream client opened in the application lifespan."""
    return request.app.state.http_client


def get_search_service(request: Request) -> MediaSearchService:
    """Build the search service for this request from the shared client."""
    settings = get_app_settings(request)
    client = get_http_client(request)
    return MediaSearchService(
        photo_adapters=build_photo_adapters(client, settings),
        video_adapters=build_video_adapters(client, settings),
    )
