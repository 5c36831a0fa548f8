"""Typer CLI commands for browsing Gamma events, tags and markets."""

from __future__ import annotations

from typing import Annotated, Any

import typer
from rich.markup import escape
from rich.table import Table

from polymarket_analyst.cli.utils import (
    console,
    exit_gamma_api_error,
    print_json,
    run_async,
    truncate,
)
from polymarket_analyst.constants import DEFAULT_EVENTS_LIMIT, DEFAULT_MARKETS_LIMIT

app = typer.Typer(help="Browse Polymarket events, tags and markets.")


def _price_summary(market: dict[str, Any]) -> str:
    from pydantic import ValidationError

    from polymarket_analyst.analysis.context import format_percentage
    from polymarket_analyst.analysis.records import MarketRecord

    try:
        record = MarketRecord.model_validate(market)
    except ValidationError:
        return ""
    return ", ".join(
        f"{outcome} {format_percentage(price)}%" for outcome, price in record.priced_outcomes()
    )


@app.command("events")
def list_events(
    tag: Annotated[
        str | None, typer.Option("--tag", "-t", help="Filter by tag label/slug substring.")
    ] = None,
    limit: Annotated[
        int, typer.Option("--limit", "-n", help="Max events.")
    ] = DEFAULT_EVENTS_LIMIT,
    offset: Annotated[int, typer.Option("--offset", help="Pagination offset.")] = 0,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List open events, newest first."""
    from polymarket_analyst.gamma import GammaAPIError, GammaClient

    async def _fetch() -> list[dict[str, Any]]:
        async with GammaClient.from_env() as gamma:
            return await gamma.get_events(tag=tag, limit=limit, offset=offset)

    try:
        events = run_async(_fetch())
    except GammaAPIError as e:
        exit_gamma_api_error(e)

    if output_json:
        print_json(events)
        return

    if not events:
        console.print("[yellow]No events found.[/yellow]")
        return

    table = Table(title="Events")
    table.add_column("ID", style="dim")
    table.add_column("Slug", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("Markets", justify="right", style="green")
    table.add_column("End Date", style="magenta")

    for event in events:
        markets = event.get("markets") or []
        table.add_row(
            str(event.get("id", "")),
            str(event.get("slug", "")),
            escape(truncate(str(event.get("title", "")), 60)),
            str(len(markets) if isinstance(markets, list) else 0),
            str(event.get("endDate") or ""),
        )

    console.print(table)


@app.command("tags")
def list_tags(
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all tags (use a label or slug with `--tag`)."""
    from polymarket_analyst.gamma import GammaAPIError, GammaClient

    async def _fetch() -> list[dict[str, Any]]:
        async with GammaClient.from_env() as gamma:
            return await gamma.get_tags()

    try:
        tags = run_async(_fetch())
    except GammaAPIError as e:
        exit_gamma_api_error(e)

    if output_json:
        print_json(tags)
        return

    table = Table(title="Tags")
    table.add_column("ID", style="dim")
    table.add_column("Label", style="cyan")
    table.add_column("Slug", style="green")
    for tag in tags:
        table.add_row(
            str(tag.get("id", "")),
            escape(str(tag.get("label", ""))),
            str(tag.get("slug", "")),
        )
    console.print(table)


@app.command("event")
def get_event(
    slug: Annotated[str, typer.Argument(help="Event slug.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show one event and its market context."""
    from polymarket_analyst.analysis import InputValidationError, build_context, to_event_record
    from polymarket_analyst.gamma import GammaAPIError, GammaClient

    async def _fetch() -> dict[str, Any]:
        async with GammaClient.from_env() as gamma:
            return await gamma.get_event(slug)

    try:
        event = run_async(_fetch())
    except GammaAPIError as e:
        exit_gamma_api_error(e)

    if output_json:
        print_json(event)
        return

    try:
        record = to_event_record(event)
    except InputValidationError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from None

    console.print(build_context(record), markup=False, highlight=False)


@app.command("markets")
def list_markets(
    tag_id: Annotated[str | None, typer.Option("--tag-id", help="Filter by tag ID.")] = None,
    limit: Annotated[
        int, typer.Option("--limit", "-n", help="Max markets.")
    ] = DEFAULT_MARKETS_LIMIT,
    offset: Annotated[int, typer.Option("--offset", help="Pagination offset.")] = 0,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List open markets."""
    from polymarket_analyst.gamma import GammaAPIError, GammaClient

    async def _fetch() -> list[dict[str, Any]]:
        async with GammaClient.from_env() as gamma:
            return await gamma.get_markets(limit=limit, offset=offset, tag_id=tag_id)

    try:
        markets = run_async(_fetch())
    except GammaAPIError as e:
        exit_gamma_api_error(e)

    if output_json:
        print_json(markets)
        return

    if not markets:
        console.print("[yellow]No markets found.[/yellow]")
        return

    table = Table(title="Markets")
    table.add_column("Question", style="white")
    table.add_column("Prices", style="green")
    table.add_column("Volume", justify="right", style="cyan")

    for market in markets:
        table.add_row(
            escape(truncate(str(market.get("question") or market.get("groupItemTitle") or ""), 70)),
            escape(_price_summary(market)),
            str(market.get("volume") or ""),
        )

    console.print(table)
