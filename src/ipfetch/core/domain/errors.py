"""Error hierarchy.

Adapters translate library exceptions (httpx, codecs, json) into these types;
only the CLI catches them, to print a message and pick the exit code.
"""

from __future__ import annotations


class IpFetchError(Exception):
    """Base class for every failure that ends a run with a non-zero exit."""


class FetchError(IpFetchError):
    """The fetch step did not produce a body."""


class TransportError(FetchError):
    """Network-level failure: DNS, connect, timeout, bad URL, redirects."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"request to {url} failed: {detail}")


class HttpStatusError(FetchError):
    """The server answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Unexpected HTTP code: {self.status_line}")

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class DecodeError(FetchError):
    """The response body could not be decoded as text."""

    def __init__(self, encoding: str, detail: str) -> None:
        self.encoding = encoding
        self.detail = detail
        super().__init__(f"cannot decode response body as {encoding}: {detail}")


class DispatchError(IpFetchError):
    """Formatting or printing the output failed."""
