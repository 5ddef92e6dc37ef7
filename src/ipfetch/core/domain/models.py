"""Domain models (Pydantic v2).

- `RequestOptions`: what the user asked for (URL, full output, field name).
- `JsonBody` / `NotJson`: the tagged outcome of classifying a response body.
  The dispatcher branches on the variant instead of on a parser exception.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from ipfetch.core.config import DEFAULT_FIELD, DEFAULT_URL


class RequestOptions(BaseModel):
    """Options for one fetch/print cycle. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str = Field(
        default=DEFAULT_URL,
        min_length=1,
        description="Target URL for the GET request.",
    )
    full: bool = Field(
        default=False,
        description="Print the whole JSON document instead of a single field.",
    )
    field: str = Field(
        default=DEFAULT_FIELD,
        description="Top-level JSON key to extract when `full` is false.",
    )


class JsonBody(BaseModel):
    """The body parsed as JSON; `value` is any JSON value."""

    model_config = ConfigDict(frozen=True)

    value: Any = None


class NotJson(BaseModel):
    """The body did not parse as JSON; `raw` is the untouched text."""

    model_config = ConfigDict(frozen=True)

    raw: str


ParsedBody = Union[JsonBody, NotJson]
