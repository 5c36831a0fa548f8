"""Typer CLI commands for reasoning-engine analysis of events."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import typer
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from polymarket_analyst.cli.utils import (
    console,
    exit_gamma_api_error,
    load_json_file,
    print_json,
    run_async,
    truncate,
)

if TYPE_CHECKING:
    from polymarket_analyst.analysis import AnalysisResult, ScanResult
    from polymarket_analyst.engine import ReasoningEngine

app = typer.Typer(help="Reasoning-engine analysis commands.")

DEFAULT_SCAN_LIMIT = 20

_BackendOption = Annotated[
    str | None,
    typer.Option(
        "--backend",
        "-b",
        help="Engine backend (anthropic/mock). Defaults to POLYMARKET_ENGINE_BACKEND.",
        show_default=False,
    ),
]
_ModelOption = Annotated[
    str | None,
    typer.Option("--model", help="Anthropic model override.", show_default=False),
]


def _build_engine(backend: str | None, model: str | None, *, quiet: bool) -> ReasoningEngine:
    from polymarket_analyst.engine import MockEngine, get_engine

    try:
        engine = get_engine(backend, model=model)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    if isinstance(engine, MockEngine) and not quiet:
        console.print(
            "[yellow]Warning:[/yellow] Using MockEngine. "
            "Set POLYMARKET_ENGINE_BACKEND=anthropic for real analysis."
        )
    return engine


def _render_analysis(result: AnalysisResult) -> None:
    console.print(
        Panel(
            Markdown(result.analysis_text),
            title=Text(result.event_label or "Analysis"),
            subtitle=Text(f"{result.model} | ${result.cost_usd:.4f}"),
        )
    )


def _render_scan(result: ScanResult) -> None:
    if result.mispriced:
        table = Table(title="Mispriced Markets", show_lines=True)
        table.add_column("Event", style="cyan")
        table.add_column("Market", style="white")
        table.add_column("Current", style="red")
        table.add_column("Fair", style="green")
        table.add_column("Diff", justify="right")
        table.add_column("Confidence", style="magenta")
        table.add_column("Recommendation", style="bold")

        for finding in result.mispriced:
            table.add_row(
                escape(truncate(finding.event_title, 40)),
                escape(truncate(finding.market_question, 50)),
                escape(finding.current_odds),
                escape(finding.fair_odds),
                escape(finding.discrepancy),
                finding.confidence,
                escape(finding.recommendation),
            )
        console.print(table)

        for finding in result.mispriced:
            if finding.reasoning:
                label = finding.slug or finding.event_title
                console.print(f"[cyan]{escape(label)}:[/cyan] {escape(finding.reasoning)}")
    else:
        console.print("[yellow]No mispriced markets reported.[/yellow]")

    if result.summary:
        console.print(Panel(Text(result.summary), title="Summary"))


@app.command("event")
def analyze_event(
    slug: Annotated[str | None, typer.Argument(help="Event slug to fetch from Gamma.")] = None,
    input_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Analyze an event JSON file instead of fetching."),
    ] = None,
    backend: _BackendOption = None,
    model: _ModelOption = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Ask the reasoning engine whether one event's odds look mispriced."""
    from polymarket_analyst.analysis import InputValidationError, MarketAnalyzer
    from polymarket_analyst.engine import ReasoningEngineError
    from polymarket_analyst.gamma import GammaAPIError, GammaClient

    if (slug is None) == (input_file is None):
        console.print("[red]Error:[/red] Provide exactly one of SLUG or --file.")
        raise typer.Exit(2)

    event: Any = load_json_file(input_file, kind="Event") if input_file else None
    engine = _build_engine(backend, model, quiet=output_json)

    async def _run() -> AnalysisResult:
        payload = event
        if payload is None and slug is not None:
            async with GammaClient.from_env() as gamma:
                payload = await gamma.get_event(slug)
        return await MarketAnalyzer(engine).analyze(payload)

    try:
        result = run_async(_run())
    except GammaAPIError as e:
        exit_gamma_api_error(e)
    except InputValidationError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(2) from None
    except ReasoningEngineError as e:
        console.print(f"[red]Engine Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from None

    if output_json:
        print_json(result.model_dump(mode="json", by_alias=True))
        return

    _render_analysis(result)


@app.command("scan")
def scan_events(
    tag: Annotated[
        str | None, typer.Option("--tag", "-t", help="Only scan events with this tag.")
    ] = None,
    limit: Annotated[
        int, typer.Option("--limit", "-n", help="Events to scan.")
    ] = DEFAULT_SCAN_LIMIT,
    offset: Annotated[int, typer.Option("--offset", help="Pagination offset.")] = 0,
    input_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Scan a JSON array of events instead of fetching."),
    ] = None,
    backend: _BackendOption = None,
    model: _ModelOption = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Scan many events in one engine call and list high-confidence mispricings."""
    from polymarket_analyst.analysis import InputValidationError, MarketAnalyzer
    from polymarket_analyst.engine import ReasoningEngineError
    from polymarket_analyst.gamma import GammaAPIError, GammaClient

    events: Any = load_json_file(input_file, kind="Events") if input_file else None
    if input_file is not None and not isinstance(events, list):
        console.print(f"[red]Error:[/red] Events file must contain a JSON array: {input_file}")
        raise typer.Exit(2)

    engine = _build_engine(backend, model, quiet=output_json)

    async def _run() -> ScanResult:
        payload = events
        if payload is None:
            async with GammaClient.from_env() as gamma:
                payload = await gamma.get_events(tag=tag, limit=limit, offset=offset)
        return await MarketAnalyzer(engine).scan(payload)

    try:
        result = run_async(_run())
    except GammaAPIError as e:
        exit_gamma_api_error(e)
    except InputValidationError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(2) from None
    except ReasoningEngineError as e:
        console.print(f"[red]Engine Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from None

    if output_json:
        print_json(result.model_dump(mode="json", by_alias=True))
        return

    _render_scan(result)
