"""Shared utilities for CLI commands (console output, error exits, async helpers)."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from polymarket_analyst.gamma.exceptions import GammaAPIError

console = Console()

T = TypeVar("T")


def run_async(coro: Coroutine[object, object, T]) -> T:
    """Run a coroutine from a sync CLI command.

    Raises:
        typer.Exit: With code 130 on KeyboardInterrupt (standard SIGINT exit code).
    """
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130) from None


def exit_gamma_api_error(error: GammaAPIError) -> NoReturn:
    """Print a Gamma API error and exit with status 1."""
    if error.status_code is not None:
        console.print(f"[red]Gamma API Error {error.status_code}:[/red] {escape(error.message)}")
    else:
        console.print(f"[red]Gamma API Error:[/red] {escape(error.message)}")
    raise typer.Exit(1)


def print_json(data: Any) -> None:
    """Write JSON to stdout (bypassing Rich markup)."""
    typer.echo(json.dumps(data, indent=2, default=str))


def load_json_file(path: Path, *, kind: str) -> Any:
    """Load a JSON input file, exiting with a readable error if it is unusable."""
    if not path.exists():
        console.print(f"[red]Error:[/red] {kind} file not found: {path}")
        raise typer.Exit(2)

    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError:
        console.print(f"[red]Error:[/red] {kind} file is not valid JSON: {path}")
        raise typer.Exit(2) from None


def truncate(text: str, width: int) -> str:
    """Shorten `text` to `width` characters with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."
