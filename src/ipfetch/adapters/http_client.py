"""httpx wrapper.

Why a wrapper:
- Standardizes timeout, headers and redirect policy for the single request.
- Makes testing easy: an `httpx` transport (e.g. `httpx.MockTransport`) can be
  injected instead of the network.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from ipfetch.core.config import AppSettings
from ipfetch.core.domain.errors import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured timeout and headers.

    The `Content-Type` header is sent even though a GET carries no body; some
    endpoints use it to pick a JSON representation.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Content-Type": settings.content_type,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        max_redirects=settings.max_redirects,
        headers=headers,
        transport=transport,
    )


def decode_body(response: httpx.Response) -> str:
    """Decode the body strictly, using the response charset or UTF-8."""

    encoding = response.encoding or "utf-8"
    try:
        return response.content.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(encoding, str(exc)) from exc


class HttpBodyFetcher:
    """`BodyFetcher` backed by httpx. One attempt per call, no retries."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, url: str) -> str:
        timeout = self._settings.http_timeout_seconds
        logger.debug(f"GET {url} (timeout={timeout}s)")
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                # httpx.Timeout bounds each phase; wait_for bounds the whole request.
                response = await asyncio.wait_for(client.get(url), timeout)
        except asyncio.TimeoutError as exc:
            logger.warning(f"Request to {url} exceeded {timeout}s")
            raise TransportError(url, "timed out") from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            detail = str(exc) or type(exc).__name__
            logger.warning(f"Transport error for {url}: {detail}")
            raise TransportError(url, detail) from exc

        logger.debug(f"{url} answered {response.status_code} ({len(response.content)} bytes)")
        if response.status_code != httpx.codes.OK:
            logger.warning(f"Unexpected status {response.status_code} for {url}")
            raise HttpStatusError(response.status_code, response.reason_phrase)

        return decode_body(response)
