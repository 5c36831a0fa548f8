"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic records built from Gamma-shaped payloads (including stringified arrays)
- MockEngine (records prompts) in place of the reasoning engine
- respx ONLY for HTTP boundary
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

    from polymarket_analyst.engine import MockEngine


# ============================================================================
# Gamma payload builders (shape matches gamma-api.polymarket.com responses)
# ============================================================================
@pytest.fixture
def make_gamma_market() -> Callable[..., dict[str, Any]]:
    """Factory for raw Gamma market payloads.

    Gamma encodes `outcomes` / `outcomePrices` as JSON strings and amounts as
    numeric strings; the defaults mirror that.
    """

    def _make(
        question: str | None = "Will NVIDIA be the largest company by market cap on Dec 31?",
        outcomes: Any = '["Yes", "No"]',
        outcome_prices: Any = '["0.753", "0.247"]',
        **overrides: Any,
    ) -> dict[str, Any]:
        base: dict[str, Any] = {
            "id": "516710",
            "question": question,
            "slug": "nvidia-largest-company-dec-31",
            "outcomes": outcomes,
            "outcomePrices": outcome_prices,
            "volume": "1234567.5",
            "liquidity": "25000",
            "active": True,
            "closed": False,
        }
        base.update(overrides)
        return base

    return _make


@pytest.fixture
def make_gamma_event(
    make_gamma_market: Callable[..., dict[str, Any]],
) -> Callable[..., dict[str, Any]]:
    """Factory for raw Gamma event payloads with nested markets."""

    def _make(
        event_id: str = "16085",
        title: str | None = "Largest company end of year?",
        markets: Any = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        base: dict[str, Any] = {
            "id": event_id,
            "slug": f"event-{event_id}",
            "title": title,
            "description": "Resolves to the company with the largest market cap.",
            "endDate": "2026-12-31T12:00:00Z",
            "active": True,
            "closed": False,
            "markets": [make_gamma_market()] if markets is None else markets,
        }
        base.update(overrides)
        return base

    return _make


@pytest.fixture
def mock_engine() -> MockEngine:
    """Mock reasoning engine that returns its default prose reply."""
    from polymarket_analyst.engine import MockEngine

    return MockEngine()
