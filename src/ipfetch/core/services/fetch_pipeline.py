"""Fetch-and-dispatch orchestration.

The CLI delegates the whole flow here so it can be reused from tests or other
entry points; output goes through `emit` instead of printing directly.
"""

from __future__ import annotations

from typing import Callable

from ipfetch.core.domain.errors import HttpStatusError
from ipfetch.core.domain.models import RequestOptions
from ipfetch.core.interfaces.fetcher import BodyFetcher
from ipfetch.core.services.dispatcher import dispatch


async def fetch_and_dispatch(
    options: RequestOptions,
    fetcher: BodyFetcher,
    *,
    emit: Callable[[str], None] = print,
) -> None:
    """Fetch `options.url` once and print the result.

    A non-200 status writes `http error: <status>` through `emit` and then
    re-raises; nothing is dispatched in that case.
    """

    try:
        body = await fetcher.fetch(options.url)
    except HttpStatusError as exc:
        emit(f"http error: {exc.status_line}")
        raise

    dispatch(body, options, emit=emit)
