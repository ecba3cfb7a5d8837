"""Shared fixtures: settings and a fake upstream behind httpx.MockTransport."""

from typing import Callable

import httpx
import pytest

from stockmedia.config import Settings

PEXELS_PHOTOS = {
    "photos": [
        {
            "id": 101,
            "width": 4000,
            "height": 3000,
            "url": "https://www.pexels.com/photo/101/",
            "photographer": "Ana",
            "alt": "Mountain lake",
            "src": {
                "original": "https://images.pexels.com/101/original.jpeg",
                "large": "https://images.pexels.com/101/large.jpeg",
                "medium": "https://images.pexels.com/101/medium.jpeg",
            },
        },
        {
            "id": 102,
            "width": 800,
            "height": 600,
            "url": "https://www.pexels.com/photo/102/",
            "photographer": None,
            "alt": None,
            "src": {
                "original": "https://images.pexels.com/102/original.jpeg",
                "medium": "https://images.pexels.com/102/medium.jpeg",
            },
        },
    ]
}

UNSPLASH_PHOTOS = {
    "results": [
        {
            "id": "u-1",
            "width": 6000,
            "height": 4000,
            "description": "A long description",
            "alt_description": None,
            "user": {"name": None, "username": "bob"},
            "links": {
                "html": "https://unsplash.com/photos/u-1",
                "download": "https://unsplash.com/photos/u-1/download",
                "download_location": "https://api.unsplash.com/photos/u-1/download?ixid=abc",
            },
            "urls": {
                "raw": "https://images.unsplash.com/u-1?raw",
                "full": "https://images.unsplash.com/u-1?full",
                "regular": "https://images.unsplash.com/u-1?regular",
                "small": "https://images.unsplash.com/u-1?small",
            },
        },
        {
            "id": "u-2",
            "width": 100,
            "height": 100,
            "alt_description": "Tiny square",
            "user": {"name": "Carla"},
            "links": {"html": "https://unsplash.com/photos/u-2"},
            "urls": {
                "raw": "https://images.unsplash.com/u-2?raw",
                "small": "https://images.unsplash.com/u-2?small",
            },
        },
    ]
}

PIXABAY_PHOTOS = {
    "total": 2,
    "hits": [
        {
            "id": 7,
            "pageURL": "https://pixabay.com/photos/7/",
            "tags": "forest, trees",
            "webformatURL": "https://pixabay.com/get/7_640.jpg",
            "largeImageURL": "https://pixabay.com/get/7_1280.jpg",
            "imageWidth": 5000,
            "imageHeight": 3000,
            "user": "dora",
        },
        {
            "id": 8,
            "pageURL": "https://pixabay.com/photos/8/",
            "tags": "",
            "webformatURL": "https://pixabay.com/get/8_640.jpg",
            "fullHDURL": "https://pixabay.com/get/8_1920.jpg",
            "imageWidth": 1920,
            "imageHeight": 1080,
        },
    ],
}

PEXELS_VIDEOS = {
    "videos": [
        {
            "id": 501,
            "url": "https://www.pexels.com/video/501/",
            "image": "https://images.pexels.com/videos/501/poster.jpg",
            "duration": 12,
            "user": {"name": "Eve"},
            "video_files": [
                {"width": 1280, "height": 720, "link": "https://videos.pexels.com/501/hd.mp4"},
                {"width": 3840, "height": 2160, "link": "https://videos.pexels.com/501/uhd.mp4"},
                {"width": None, "height": None, "link": "https://videos.pexels.com/501/hls.m3u8"},
            ],
        },
        {
            "id": 502,
            "url": "https://www.pexels.com/video/502/",
            "image": "https://images.pexels.com/videos/502/poster.jpg",
            "duration": 0,
            "user": None,
            "video_files": [{"width": 0, "height": 0, "link": "https://videos.pexels.com/502/x.mp4"}],
        },
    ]
}

PIXABAY_VIDEOS = {
    "hits": [
        {
            "id": 900,
            "pageURL": "https://pixabay.com/videos/900/",
            "tags": "city, night",
            "duration": 30,
            "user": "fred",
            "userImageURL": "https://cdn.pixabay.com/user/fred.png",
            "videos": {
                "large": {"url": "", "width": 0, "height": 0, "thumbnail": ""},
                "medium": {
                    "url": "https://cdn.pixabay.com/video/900_medium.mp4",
                    "width": 1920,
                    "height": 1080,
                    "thumbnail": "https://cdn.pixabay.com/video/900_medium.jpg",
                },
                "small": {
                    "url": "https://cdn.pixabay.com/video/900_small.mp4",
                    "width": 1280,
                    "height": 720,
                    "thumbnail": "https://cdn.pixabay.com/video/900_small.jpg",
                },
            },
        },
        {"id": 901, "tags": "", "videos": {}},
    ]
}

ROUTES = {
    ("api.pexels.com", "/v1/search"): PEXELS_PHOTOS,
    ("api.unsplash.com", "/search/photos"): UNSPLASH_PHOTOS,
    ("pixabay.com", "/api/"): PIXABAY_PHOTOS,
    ("api.pexels.com", "/videos/search"): PEXELS_VIDEOS,
    ("pixabay.com", "/api/videos/"): PIXABAY_VIDEOS,
}


class FakeUpstream:
    """Serves canned provider payloads and records every request it sees."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.overrides: dict[str, httpx.Response | Exception] = {}

    def respond(self, host: str, response: httpx.Response | Exception) -> None:
        """Make every request to ``host`` return ``response`` (or raise it)."""
        self.overrides[host] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        override = self.overrides.get(request.url.host)
        if isinstance(override, Exception):
            raise override
        if override is not None:
            # fresh copy so the same canned response can be served repeatedly
            return httpx.Response(
                override.status_code, headers=override.headers, content=override.content
            )
        payload = ROUTES.get((request.url.host, request.url.path))
        if payload is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, json=payload)

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Settings with every credential set, ignoring the process environment's .env."""

    def _make(**overrides) -> Settings:
        values = {
            "pexels_api_key": "pexels-key",
            "unsplash_access_key": "unsplash-key",
            "pixabay_api_key": "pixabay-key",
            "log_json": False,
            **overrides,
        }
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    """AsyncClient routed to the fake upstream."""
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream), follow_redirects=True)
