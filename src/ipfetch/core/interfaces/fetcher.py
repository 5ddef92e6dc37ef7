"""Body fetcher contract.

Why a Protocol:
- Structural contract (duck typing), no inheritance required.
- The pipeline can run against the httpx adapter or a test stub.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BodyFetcher(Protocol):
    """Minimal contract for the fetch step.

    Design rules:
    - `fetch` is async because it performs network I/O.
    - Returns the decoded body or raises a `FetchError` subtype.
    """

    async def fetch(self, url: str) -> str:
        """Fetch `url` and return the response body as text."""

        ...
