"""JSON parsing and formatting.

- Pretty output: 2-space indent, keys in source order, UTF-8 kept as is.
- Compact output: no whitespace, as used for a single non-string field.
"""

from __future__ import annotations

import json
import math
from typing import Any

from ipfetch.core.domain.errors import DispatchError


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not valid JSON.
    raise ValueError(f"invalid JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def loads_strict(text: str) -> Any:
    """Parse `text` as JSON. Raises `ValueError` (or `RecursionError`)."""

    return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)


def dumps_pretty(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise DispatchError(f"cannot serialize JSON document: {exc}") from exc


def dumps_compact(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise DispatchError(f"cannot serialize JSON value: {exc}") from exc
