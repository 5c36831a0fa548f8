"""Analysis pipeline: normalize -> render/project -> prompt -> engine -> interpret.

Each call is independent and request-scoped. The only suspension point is the
single reasoning-engine call; cancelling the awaiting task cancels that call.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from polymarket_analyst.constants import ANALYZE_MAX_TOKENS, SCAN_MAX_TOKENS

from .context import build_context
from .exceptions import InputValidationError
from .interpret import interpret_batch, interpret_single
from .prompts import build_scan_projection, compose_analysis_prompt, compose_scan_prompt
from .records import EventRecord

if TYPE_CHECKING:
    from polymarket_analyst.analysis.schemas import AnalysisResult, ScanResult
    from polymarket_analyst.engine import ReasoningEngine

logger = structlog.get_logger()

EventInput = EventRecord | Mapping[str, Any]


def to_event_record(event: EventInput) -> EventRecord:
    """Validate a raw Gamma event payload (or pass a record through)."""
    if isinstance(event, EventRecord):
        return event
    if not isinstance(event, Mapping):
        raise InputValidationError(f"Event data must be an object, got {type(event).__name__}")
    try:
        return EventRecord.model_validate(dict(event))
    except ValidationError as e:
        raise InputValidationError(f"Invalid event data: {e.error_count()} field errors") from e


class MarketAnalyzer:
    """Runs single-event analyses and multi-event mispricing scans.

    Holds no per-request state, so one instance can serve concurrent calls.
    """

    def __init__(self, engine: ReasoningEngine) -> None:
        self.engine = engine

    async def analyze(
        self,
        event: EventInput | None,
        *,
        today: date | None = None,
    ) -> AnalysisResult:
        """Ask the engine for a deep analysis of one event.

        Args:
            event: EventRecord or raw Gamma event payload.
            today: Date the engine should reason from (defaults to today in UTC).

        Returns:
            AnalysisResult with the engine's prose and an echo of the markets.

        Raises:
            InputValidationError: If `event` is missing or unusable.
            ReasoningEngineError: If the engine call fails.
        """
        if event is None:
            raise InputValidationError("Event data required")

        record = to_event_record(event)
        prompt = compose_analysis_prompt(
            build_context(record),
            today or datetime.now(UTC).date(),
        )

        logger.info(
            "Analyzing event",
            slug=record.slug,
            markets=len(record.markets),
            model=self.engine.model,
        )
        raw_text = await self.engine.complete(prompt, max_tokens=ANALYZE_MAX_TOKENS)
        cost_usd = self.engine.get_last_call_cost_usd()
        logger.info("Analysis complete", slug=record.slug, cost_usd=cost_usd)

        return interpret_single(raw_text, record, model=self.engine.model, cost_usd=cost_usd)

    async def scan(self, events: Sequence[EventInput] | None) -> ScanResult:
        """Scan many events in one engine call and return the reported mispricings.

        Events with no markets are dropped before the prompt is built. Findings are
        the engine's self-filtered list (high confidence, large discrepancy); they
        are not re-validated here.

        Raises:
            InputValidationError: If `events` is missing, empty, or unusable.
            ReasoningEngineError: If the engine call fails.
        """
        if not events or isinstance(events, str | bytes):
            raise InputValidationError("Events array required")

        records = [to_event_record(event) for event in events]
        projection = build_scan_projection(records)
        if not projection:
            logger.warning("No events with markets to scan", received=len(records))

        logger.info(
            "Scanning events",
            received=len(records),
            projected=len(projection),
            model=self.engine.model,
        )
        raw_text = await self.engine.complete(
            compose_scan_prompt(projection), max_tokens=SCAN_MAX_TOKENS
        )
        result = interpret_batch(raw_text)
        logger.info(
            "Scan complete",
            findings=len(result.mispriced),
            cost_usd=self.engine.get_last_call_cost_usd(),
        )
        return result
