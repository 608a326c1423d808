from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

from lineread.errors import EndOfStream, InputError, ParseFailure


def build_console(use_rich: bool) -> Console:
    return Console(file=sys.stderr, force_terminal=use_rich, stderr=True)


def report_error(console: Console, error: InputError) -> None:
    """Print a one-line diagnostic for a failed read."""
    if isinstance(error, EndOfStream):
        console.print("[yellow]end of input[/yellow]")
    elif isinstance(error, ParseFailure):
        console.print(f"[red]invalid input[/red] {escape(repr(error.text))}: {escape(str(error.cause))}")
    else:
        console.print(f"[red]{escape(str(error))}[/red]")
