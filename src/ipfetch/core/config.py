"""Application configuration.

Why here:
- Centralizes the tunables (pydantic-settings) without polluting the CLI.
- Lets the HTTP adapter and the CLI read the same values.

Only environment variables are read (prefix `IPFETCH_`); there is no `.env`
file. With nothing set, the defaults reproduce the documented CLI behavior.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URL = "https://myip.ruru910.com"
DEFAULT_FIELD = "IP"


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="IPFETCH_",
        extra="ignore",
        case_sensitive=False,
    )

    default_url: str = Field(
        default=DEFAULT_URL,
        min_length=1,
        description="URL requested when --url is not given.",
    )
    default_field: str = Field(
        default=DEFAULT_FIELD,
        description="Top-level JSON key extracted when --field is not given.",
    )
    http_timeout_seconds: float = Field(
        default=3.0,
        gt=0,
        description="Total timeout for the request (seconds).",
    )
    user_agent: str = Field(
        default="rust-agent",
        min_length=1,
        description="User-Agent header sent with the request.",
    )
    content_type: str = Field(
        default="application/json",
        min_length=1,
        description="Content-Type header sent with the request.",
    )
    max_redirects: int = Field(
        default=10,
        ge=0,
        le=50,
        description="Maximum number of redirects followed.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Base log level for stderr logging (DEBUG, INFO, WARNING, ...).",
    )
