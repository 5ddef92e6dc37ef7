"""Rich helpers for the CLI.

Program output (JSON, field values, body text) is written plainly with
`typer.echo`; Rich is only used for messages on stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


def print_error(console: Console, message: str, *, hint: str | None = None) -> None:
    """Print an `error: ...` line, plus an optional dimmed hint."""

    console.print(Text.assemble(("error: ", "bold red"), message))
    if hint:
        console.print(Text(hint, style="dim"))
