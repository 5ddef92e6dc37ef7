"""Entry point of the `ipfetch` command.

Parses the flags, configures logging on stderr, runs the fetch/dispatch
pipeline and maps `IpFetchError` to exit code 1.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from ipfetch import __version__
from ipfetch.adapters.http_client import HttpBodyFetcher
from ipfetch.cli.ui_components import print_error
from ipfetch.core.config import DEFAULT_FIELD, DEFAULT_URL, AppSettings
from ipfetch.core.domain.errors import IpFetchError, TransportError
from ipfetch.core.domain.models import RequestOptions
from ipfetch.core.interfaces.fetcher import BodyFetcher
from ipfetch.core.services.fetch_pipeline import fetch_and_dispatch

app = typer.Typer(
    add_completion=False,
    help="Request an IP-info endpoint and print a JSON field, the full JSON, or the HTML body text.",
)

_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ipfetch {__version__}")
        raise typer.Exit()


def _resolve_log_level(base_level: str, verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    level = logging.getLevelName(base_level.upper())
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(base_level: str, verbose: int) -> None:
    logging.basicConfig(
        level=_resolve_log_level(base_level, verbose),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def _build_fetcher(settings: AppSettings) -> BodyFetcher:
    return HttpBodyFetcher(settings)


@app.command()
def fetch(
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Sets the URL to request.",
        show_default=DEFAULT_URL,
    ),
    full: bool = typer.Option(
        False,
        "--full",
        help="Print the full JSON document.",
    ),
    field: str | None = typer.Option(
        None,
        "--field",
        "-f",
        help="JSON field to extract.",
        show_default=DEFAULT_FIELD,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Log more on stderr (-v info, -vv debug).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Fetch the URL once and print its content."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, f"invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    _configure_logging(settings.log_level, verbose)

    try:
        options = RequestOptions(
            url=url if url is not None else settings.default_url,
            full=full,
            field=field if field is not None else settings.default_field,
        )
    except ValidationError as exc:
        raise typer.BadParameter("URL must not be empty", param_hint="'--url'") from exc

    try:
        asyncio.run(fetch_and_dispatch(options, _build_fetcher(settings), emit=typer.echo))
    except TransportError as exc:
        print_error(_err_console, str(exc), hint="Check the URL and your network connection.")
        raise typer.Exit(code=1) from exc
    except IpFetchError as exc:
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
