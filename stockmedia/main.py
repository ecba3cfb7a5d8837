"""FastAPI application for the stock media proxy."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse

from stockmedia.config import Settings, get_settings
from stockmedia.dependencies import get_app_settings, get_http_client, get_search_service
from stockmedia.download import DEFAULT_FILENAME, proxy_download
from stockmedia.exceptions import ProxyError, StockMediaError, ValidationError
from stockmedia.middleware.request_logging import RequestLoggingMiddleware
from stockmedia.models import BaseUrlResponse, SearchResponse, VideoSearchResponse
from stockmedia.services import MediaSearchService
from stockmedia.utils.logging import setup_logging

logger = logging.getLogger(__name__)

OptionalParam = Annotated[str | None, Query()]


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def proxy_error_handler(request: Request, exc: ProxyError) -> PlainTextResponse:
    log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(log_level, f"Download failed with {exc.status_code}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def stock_media_error_handler(request: Request, exc: StockMediaError) -> JSONResponse:
    """Configuration and upstream failures of a single-source request."""
    logger.error(f"{request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc) or "Server error"})


def create_app(settings: Settings | None = None, http_client: httpx.AsyncClient | None = None) -> FastAPI:
    """
    Create the application.

    Args:
        settings: Configuration; defaults to the environment
        http_client: Upstream client to use instead of opening one in the
            lifespan. The caller keeps ownership and closes it.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_json, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = http_client is None
        client = http_client or httpx.AsyncClient(
            timeout=settings.http_timeout,
            follow_redirects=True,
        )
        app.state.http_client = client
        configured = [name for name, ok in settings.provider_status().items() if ok]
        logger.info(f"Starting {settings.app_title} {settings.app_version}, providers: {configured}")
        try:
            yield
        finally:
            if owned:
                await client.aclose()
            logger.info(f"Shutting down {settings.app_title}")

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="Aggregated photo and video search over stock media providers",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.http_client = http_client

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ProxyError, proxy_error_handler)
    app.add_exception_handler(StockMediaError, stock_media_error_handler)

    @app.get("/health")
    async def health_check(app_settings: Settings = Depends(get_app_settings)):
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "stockmedia",
            "version": app_settings.app_version,
            "providers": app_settings.provider_status(),
        }

    @app.get("/api/search", response_model=SearchResponse)
    async def search_photos(
        q: OptionalParam = None,
        source: OptionalParam = None,
        page: OptionalParam = None,
        per_page: OptionalParam = None,
        service: MediaSearchService = Depends(get_search_service),
    ):
        """Search photos in one provider or in all of them."""
        return await service.search_photos(q, source, page, per_page)

    @app.get("/api/videos", response_model=VideoSearchResponse)
    async def search_videos(
        q: OptionalParam = None,
        source: OptionalParam = None,
        page: OptionalParam = None,
        per_page: OptionalParam = None,
        service: MediaSearchService = Depends(get_search_service),
    ):
        """Search videos; unconfigured providers are skipped."""
        return await service.search_videos(q, source, page, per_page)

    @app.get("/api/download")
    async def download(
        url: OptionalParam = None,
        name: Annotated[str, Query()] = DEFAULT_FILENAME,
        client: httpx.AsyncClient = Depends(get_http_client),
    ) -> StreamingResponse:
        """Stream an upstream file back as an attachment."""
        try:
            return await proxy_download(client, url, name)
        except ProxyError:
            raise
        except Exception as e:
            logger.exception("Unexpected download failure")
            raise ProxyError(500, str(e) or "Download error") from e

    @app.get("/api/baseurl", response_model=BaseUrlResponse)
    async def base_url(app_settings: Settings = Depends(get_app_settings)):
        """Echo the configured public base URL."""
        return BaseUrlResponse(BASE_URL=app_settings.base_url or None)

    return app
