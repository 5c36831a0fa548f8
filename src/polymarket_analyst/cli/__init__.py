"""
CLI application for Polymarket Analyst.

Provides commands for browsing Gamma market data and running mispricing analyses.
"""

from __future__ import annotations

import typer
from dotenv import find_dotenv, load_dotenv

from polymarket_analyst.cli.analysis import app as analysis_app
from polymarket_analyst.cli.browse import app as browse_app
from polymarket_analyst.cli.utils import console

app = typer.Typer(
    name="polymarket",
    help="Polymarket Analyst CLI - spot mispriced prediction-market odds.",
    add_completion=False,
)

app.add_typer(browse_app, name="browse")
app.add_typer(analysis_app, name="analysis")


@app.callback()
def main() -> None:
    """Polymarket Analyst CLI."""
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def version() -> None:
    """Show version information."""
    from polymarket_analyst import __version__

    console.print(f"polymarket-analyst v{__version__}")
