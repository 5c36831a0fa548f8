"""Render an event and its markets into the dossier text embedded in prompts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .records import EventRecord, MarketRecord


def format_percentage(price: float) -> str:
    """Render a 0..1 price as a percentage with one decimal place (0.753 -> "75.3")."""
    return f"{price * 100:.1f}"


def format_currency(amount: float) -> str:
    """Render an amount with thousands separators and up to three decimals.

    Mirrors en-US locale number rendering: `1234567.5` -> `$1,234,567.5`,
    `2500` -> `$2,500`.
    """
    text = f"{amount:,.3f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return f"${text}"


def _render_market(index: int, market: MarketRecord) -> list[str]:
    lines = [f"\n--- Market {index} ---", f"Question: {market.display_question}"]

    if market.outcomes and market.outcome_prices:
        lines.append("Current Prices:")
        lines.extend(
            f"  - {outcome}: {format_percentage(price)}%"
            for outcome, price in market.priced_outcomes()
        )

    # Zero is treated like a missing value: no "$0" lines.
    if market.volume:
        lines.append(f"Volume: {format_currency(market.volume)}")
    if market.liquidity:
        lines.append(f"Liquidity: {format_currency(market.liquidity)}")
    return lines


def build_context(event: EventRecord) -> str:
    """Build the human-readable market context for a single event.

    The output depends only on `event`, so identical input renders byte-identical
    text. Markets keep their input order and are numbered from 1.
    """
    lines = [
        f"EVENT: {event.display_title}",
        f"DESCRIPTION: {event.display_description}",
        f"END DATE: {event.display_end_date}",
        "",
    ]

    if event.markets:
        lines.append("MARKETS:")
        for index, market in enumerate(event.markets, start=1):
            lines.extend(_render_market(index, market))

    return "\n".join(lines) + "\n"
