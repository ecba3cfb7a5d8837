"""Pass-through download of upstream media files."""

import logging
import re
from typing import AsyncIterator

import httpx
from fastapi.responses import StreamingResponse

from stockmedia.exceptions import ProxyError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "image.jpg"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

_HTTP_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
_UNSAFE_FILENAME_CHARS_RE = re.compile(r'["\\\r\n\x00-\x1f]')


def is_http_url(url: str | None) -> bool:
    return bool(url) and bool(_HTTP_URL_RE.match(url))


def sanitize_filename(name: str | None) -> str:
    """Make ``name`` safe to place inside a quoted Content-Disposition value."""
    cleaned = _UNSAFE_FILENAME_CHARS_RE.sub("", (name or "").strip())
    # Header values are latin-1 on the wire
    cleaned = cleaned.encode("latin-1", "replace").decode("latin-1")
    return cleaned or DEFAULT_FILENAME


async def relay_body(upstream: httpx.Response) -> AsyncIterator[bytes]:
    """Yield the upstream body, closing the upstream response however iteration ends."""
    try:
        async for chunk in upstream.aiter_bytes():
            yield chunk
    finally:
        await upstream.aclose()


async def proxy_download(client: httpx.AsyncClient, url: str | None, name: str | None) -> StreamingResponse:
    """
    Stream an upstream resource back to the caller as an attachment.

    The body is relayed chunk by chunk. The upstream response is closed when
    the relay ends, including on a client disconnect.

    Args:
        client: Shared HTTP client (follows redirects)
        url: Absolute http(s) URL of the resource
        name: Suggested download filename

    Raises:
        ProxyError: 400 for a non-http(s) URL, 502 for an upstream error status,
            500 for a transport failure
    """
    if not is_http_url(url):
        raise ProxyError(400, "Invalid URL")

    filename = sanitize_filename(name)
    request = client.build_request("GET", url)
    try:
        upstream = await client.send(request, stream=True, follow_redirects=True)
    except httpx.RequestError as e:
        logger.error(f"Download failed for {url}: {e}")
        raise ProxyError(500, str(e) or "Download failed") from e

    if not upstream.is_success:
        status = upstream.status_code
        await upstream.aclose()
        logger.warning(f"Download upstream returned {status} for {url}")
        raise ProxyError(502, f"Download failed. Upstream status {status}")

    headers = {
        "Content-Type": upstream.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
        "Content-Disposition": f'attachment; filename="{filename}"',
    }
    logger.info(f"Streaming download {filename} from {upstream.url.host}")
    return StreamingResponse(relay_body(upstream), headers=headers)
