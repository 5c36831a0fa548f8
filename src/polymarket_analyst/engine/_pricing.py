"""Per-call cost estimates for Anthropic models."""

from __future__ import annotations

import os
from dataclasses import dataclass

# USD per 1M tokens (input, output), matched by model-name substring.
_FAMILY_PRICES: dict[str, tuple[float, float]] = {
    "opus": (15.0, 75.0),
    "sonnet": (3.0, 15.0),
    "haiku": (0.8, 4.0),
}
_FALLBACK_FAMILY = "sonnet"


def _env_price(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a float") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive")
    return value


@dataclass(frozen=True)
class AnthropicPricing:
    """Token pricing (USD per 1M tokens)."""

    input_usd_per_mtok: float
    output_usd_per_mtok: float

    @classmethod
    def for_model(cls, model: str) -> AnthropicPricing:
        """Resolve pricing for `model`.

        ANTHROPIC_INPUT_USD_PER_MTOK / ANTHROPIC_OUTPUT_USD_PER_MTOK override the
        table when both are set.
        """
        input_override = _env_price("ANTHROPIC_INPUT_USD_PER_MTOK")
        output_override = _env_price("ANTHROPIC_OUTPUT_USD_PER_MTOK")
        if input_override is not None and output_override is not None:
            return cls(input_usd_per_mtok=input_override, output_usd_per_mtok=output_override)

        lowered = model.lower()
        family = next((name for name in _FAMILY_PRICES if name in lowered), _FALLBACK_FAMILY)
        input_price, output_price = _FAMILY_PRICES[family]
        return cls(input_usd_per_mtok=input_price, output_usd_per_mtok=output_price)

    def cost_usd(self, *, input_tokens: int, output_tokens: int) -> float:
        """Calculate total cost for the given token counts."""
        return (
            input_tokens * self.input_usd_per_mtok + output_tokens * self.output_usd_per_mtok
        ) / 1_000_000
