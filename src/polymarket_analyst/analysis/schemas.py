"""Result schemas returned by the analysis pipeline.

All models serialize with camelCase aliases (`model_dump(by_alias=True)`), which is
also the shape the reasoning engine is asked to emit for batch scans.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ConfidenceLevel = Literal["High", "Medium", "Low"]

_SCHEMA_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class MarketEcho(BaseModel):
    """Question/outcomes/prices subset echoed back for client-side reconciliation."""

    model_config = _SCHEMA_CONFIG

    question: str | None = None
    outcomes: list[str] = Field(default_factory=list)
    outcome_prices: list[str | float | None] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Single-event analysis: the engine's prose plus what was analyzed."""

    model_config = _SCHEMA_CONFIG

    analysis_text: str = Field(description="Raw reasoning-engine prose")
    event_label: str | None = Field(default=None, description="Event title (or question)")
    markets_echo: list[MarketEcho] = Field(default_factory=list)
    model: str | None = Field(default=None, description="Engine model that produced the text")
    cost_usd: float = Field(default=0.0, ge=0.0, description="Estimated engine cost")


class MispricingFinding(BaseModel):
    """One mispriced market reported by a batch scan.

    Odds and discrepancy are free text as emitted by the engine; they are not
    parsed or re-validated.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    event_id: str = ""
    event_title: str = ""
    slug: str = ""
    market_question: str = ""
    current_odds: str = ""
    fair_odds: str = ""
    discrepancy: str = ""
    reasoning: str = ""
    confidence: ConfidenceLevel
    recommendation: str = ""

    @field_validator(
        "event_id",
        "event_title",
        "slug",
        "market_question",
        "current_odds",
        "fair_odds",
        "discrepancy",
        "reasoning",
        "recommendation",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("confidence", mode="before")
    @classmethod
    def _normalize_confidence(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().capitalize()
        return value


class ScanResult(BaseModel):
    """Batch scan outcome: findings in engine order plus a free-text summary."""

    model_config = _SCHEMA_CONFIG

    mispriced: list[MispricingFinding] = Field(default_factory=list)
    summary: str = ""

    @field_validator("mispriced", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("summary", mode="before")
    @classmethod
    def _none_to_empty_summary(cls, value: Any) -> Any:
        return "" if value is None else value
