"""Tests for the HTTP surface."""

import httpx
import pytest
from fastapi.testclient import TestClient

from stockmedia.main import create_app


@pytest.fixture
def make_client(make_settings, http_client):
    """Build a TestClient for an app wired to the fake upstream."""

    def _make(**overrides) -> TestClient:
        app = create_app(make_settings(**overrides), http_client=http_client)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


def test_health_endpoint(make_client):
    r = make_client(unsplash_access_key="").get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "version" in data
    assert data["providers"] == {"pexels": True, "unsplash": False, "pixabay": True}


def test_search_all_returns_camel_case_items(client):
    r = client.get("/api/search", params={"q": "nature", "source": "all"})
    assert r.status_code == 200
    data = r.json()
    assert set(data) == {"items", "page", "perPage", "errors"}
    assert data["errors"] == []
    assert data["page"] == 1
    assert data["perPage"] == 30

    top = data["items"][0]
    assert top["source"] == "unsplash"
    assert top["pageUrl"] == "https://unsplash.com/photos/u-1"
    assert top["downloadUrl"].endswith("&client_id=unsplash-key")
    assert top["src"] == {
        "preview": "https://images.unsplash.com/u-1?regular",
        "original": "https://images.unsplash.com/u-1?full",
    }
    areas = [i["width"] * i["height"] for i in data["items"]]
    assert areas == sorted(areas, reverse=True)


def test_search_partial_failure_still_200(client, upstream):
    upstream.respond("api.pexels.com", httpx.Response(500))

    r = client.get("/api/search", params={"q": "nature", "source": "all", "per_page": "12"})

    assert r.status_code == 200
    data = r.json()
    assert data["errors"] == ["Pexels error 500"]
    assert data["perPage"] == 12
    assert {i["source"] for i in data["items"]} == {"unsplash", "pixabay"}


def test_search_single_source_failure_is_500(client, upstream):
    upstream.respond("api.pexels.com", httpx.Response(500))

    r = client.get("/api/search", params={"q": "nature", "source": "pexels"})

    assert r.status_code == 500
    assert r.json() == {"error": "Pexels error 500"}


def test_search_missing_credential_is_500(make_client, upstream):
    r = make_client(pexels_api_key="").get("/api/search", params={"q": "nature"})

    assert r.status_code == 500
    assert r.json() == {"error": "PEXELS_API_KEY is not configured"}
    assert upstream.requests == []


@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
def test_search_without_query_is_400(client, upstream, params):
    r = client.get("/api/search", params=params)

    assert r.status_code == 400
    assert "error" in r.json()
    assert upstream.requests == []


def test_search_invalid_source_is_400(client, upstream):
    r = client.get("/api/search", params={"q": "nature", "source": "bogus"})

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid source 'bogus'"}
    assert upstream.requests == []


def test_search_bad_numbers_fall_back_to_defaults(client):
    r = client.get("/api/search", params={"q": "nature", "page": "x", "per_page": "y"})

    assert r.status_code == 200
    assert r.json()["page"] == 1
    assert r.json()["perPage"] == 30


def test_videos_endpoint(client):
    r = client.get("/api/videos", params={"q": "waves", "source": "all", "per_page": "100"})

    assert r.status_code == 200
    data = r.json()
    assert data["perPage"] == 40
    assert data["errors"] == []
    first = data["items"][0]
    assert first["videoUrl"] == "https://videos.pexels.com/501/uhd.mp4"
    assert first["duration"] == 12
    assert first["src"]["preview"] == first["src"]["original"]


def test_videos_unconfigured_providers_are_skipped(make_client, upstream):
    client = make_client(pexels_api_key="", pixabay_api_key="")

    r = client.get("/api/videos", params={"q": "waves", "source": "all"})

    assert r.status_code == 200
    assert r.json() == {"items": [], "page": 1, "perPage": 20, "errors": []}
    assert upstream.requests == []


def test_download_rejects_non_http_url(client, upstream):
    r = client.get("/api/download", params={"url": "ftp://x"})

    assert r.status_code == 400
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "Invalid URL"
    assert upstream.requests == []


def test_download_rejects_missing_url(client):
    assert client.get("/api/download").status_code == 400


def test_download_upstream_error_is_502(client):
    r = client.get("/api/download", params={"url": "https://cdn.example.com/missing.jpg"})

    assert r.status_code == 502
    assert r.headers["content-type"].startswith("text/plain")
    assert "404" in r.text


def test_download_streams_body_with_headers(client, upstream):
    body = bytes(range(256)) * 64
    upstream.respond(
        "cdn.example.com",
        httpx.Response(200, content=body, headers={"content-type": "image/png"}),
    )

    r = client.get(
        "/api/download",
        params={"url": "https://cdn.example.com/a.png", "name": 'my "best" photo.png'},
    )

    assert r.status_code == 200
    assert r.content == body
    assert r.headers["content-type"] == "image/png"
    assert r.headers["content-disposition"] == 'attachment; filename="my best photo.png"'


def test_download_filename_backslash_keeps_header_well_formed(client, upstream):
    upstream.respond("cdn.example.com", httpx.Response(200, content=b"x"))

    r = client.get("/api/download", params={"url": "https://cdn.example.com/a.jpg", "name": "a\\"})

    assert r.status_code == 200
    assert r.headers["content-disposition"] == 'attachment; filename="a"'


def test_download_follows_redirects_and_defaults(client, upstream):
    upstream.respond(
        "old.example.com",
        httpx.Response(302, headers={"location": "https://cdn.example.com/final"}),
    )
    upstream.respond("cdn.example.com", httpx.Response(200, content=b"data"))

    r = client.get("/api/download", params={"url": "https://old.example.com/start"})

    assert r.status_code == 200
    assert r.content == b"data"
    assert r.headers["content-type"] == "application/octet-stream"
    assert r.headers["content-disposition"] == 'attachment; filename="image.jpg"'


def test_download_transport_failure_is_500(client, upstream):
    upstream.respond("cdn.example.com", httpx.ConnectError("connection refused"))

    r = client.get("/api/download", params={"url": "https://cdn.example.com/a.jpg"})

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("text/plain")


def test_baseurl_echo(make_client):
    assert make_client(base_url="https://media.example.com").get("/api/baseurl").json() == {
        "BASE_URL": "https://media.example.com"
    }
    assert make_client(base_url=None).get("/api/baseurl").json() == {"BASE_URL": None}


def test_responses_carry_request_id(client):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")
