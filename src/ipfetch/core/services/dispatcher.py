"""Content dispatch: decide between JSON and HTML output for a body.

The JSON/HTML decision depends only on whether the body parses as JSON;
response headers are never consulted. Anything that is not JSON (plain text
included) goes through HTML body extraction.
"""

from __future__ import annotations

import logging
from typing import Callable

from ipfetch.adapters.html_text import extract_body_text
from ipfetch.adapters.json_formatter import dumps_compact, dumps_pretty, loads_strict
from ipfetch.core.domain.models import JsonBody, NotJson, ParsedBody, RequestOptions

logger = logging.getLogger(__name__)


def parse_body(body: str) -> ParsedBody:
    """Classify `body` as `JsonBody` or `NotJson`."""

    try:
        value = loads_strict(body)
    except (ValueError, RecursionError):
        return NotJson(raw=body)
    return JsonBody(value=value)


def render_json(value: object, options: RequestOptions) -> str:
    if options.full:
        return dumps_pretty(value)

    if isinstance(value, dict) and options.field in value:
        selected = value[options.field]
        if isinstance(selected, str):
            return selected
        return dumps_compact(selected)

    logger.debug(f"Field {options.field!r} not found, printing whole document")
    return dumps_pretty(value)


def render(body: str, options: RequestOptions) -> str:
    """Return the text `dispatch` would print for `body`."""

    parsed = parse_body(body)
    if isinstance(parsed, JsonBody):
        logger.debug("Body is JSON")
        return render_json(parsed.value, options)

    logger.debug("Body is not JSON, extracting HTML body text")
    return extract_body_text(parsed.raw)


def dispatch(
    body: str,
    options: RequestOptions,
    *,
    emit: Callable[[str], None] = print,
) -> None:
    """Render `body` according to `options` and hand the result to `emit`.

    Raises `DispatchError` when the output cannot be serialized.
    """

    emit(render(body, options))
