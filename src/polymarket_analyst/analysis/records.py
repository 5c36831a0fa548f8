"""Normalized event/market records built from raw Gamma API payloads.

Every upstream field is optional. Loosely-typed fields are coerced exactly once,
when a record is validated, so rendering code never has to guess at shapes:

- `outcomes`, `outcomePrices` and `markets` may arrive as JSON-encoded strings
- `volume` and `liquidity` may arrive as numeric strings

Display defaults ("Unknown", "No description") are exposed as properties next to
the fields they default.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalize import coerce_optional_float, normalize_array_field

UNKNOWN = "Unknown"
NO_DESCRIPTION = "No description"

_RECORD_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    extra="ignore",
    coerce_numbers_to_str=True,
)


class MarketRecord(BaseModel):
    """A single market (one question with priced outcomes) inside an event."""

    model_config = _RECORD_CONFIG

    question: str | None = None
    group_item_title: str | None = Field(default=None, alias="groupItemTitle")
    outcomes: list[str] = Field(default_factory=list)
    outcome_prices: list[str | float | None] = Field(default_factory=list, alias="outcomePrices")
    volume: float | None = None
    liquidity: float | None = None

    @field_validator("outcomes", mode="before")
    @classmethod
    def _decode_outcomes(cls, value: Any) -> list[str]:
        return [str(item) for item in normalize_array_field(value)]

    @field_validator("outcome_prices", mode="before")
    @classmethod
    def _decode_outcome_prices(cls, value: Any) -> list[Any]:
        return normalize_array_field(value)

    @field_validator("volume", "liquidity", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float | None:
        return coerce_optional_float(value)

    @property
    def display_question(self) -> str:
        return self.question or self.group_item_title or UNKNOWN

    def priced_outcomes(self) -> list[tuple[str, float]]:
        """Pair outcomes with their prices by position.

        Pairing stops at the shorter list. Prices that are not finite numbers are
        skipped rather than rendered.
        """
        pairs: list[tuple[str, float]] = []
        for outcome, raw_price in zip(self.outcomes, self.outcome_prices, strict=False):
            price = coerce_optional_float(raw_price)
            if price is None:
                continue
            pairs.append((outcome, price))
        return pairs


class EventRecord(BaseModel):
    """A prediction-market event and its markets."""

    model_config = _RECORD_CONFIG

    id: str | None = None
    slug: str | None = None
    title: str | None = None
    question: str | None = None
    description: str | None = None
    end_date: str | None = Field(default=None, alias="endDate")
    markets: list[MarketRecord] = Field(default_factory=list)

    @field_validator("markets", mode="before")
    @classmethod
    def _decode_markets(cls, value: Any) -> list[Any]:
        return normalize_array_field(value)

    @property
    def display_title(self) -> str:
        return self.title or UNKNOWN

    @property
    def display_description(self) -> str:
        return self.description or NO_DESCRIPTION

    @property
    def display_end_date(self) -> str:
        return self.end_date or UNKNOWN

    @property
    def label(self) -> str | None:
        """Short label used to echo which event was analyzed."""
        return self.title or self.question
