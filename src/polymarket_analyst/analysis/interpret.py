"""Interpret reasoning-engine replies into structured results.

Batch replies are requested as JSON but often arrive wrapped in prose or markdown
fences, or not as JSON at all. Interpretation never raises: when no usable object
can be recovered the whole reply is kept as the scan summary.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from .schemas import AnalysisResult, MarketEcho, MispricingFinding, ScanResult

if TYPE_CHECKING:
    from .records import EventRecord

logger = structlog.get_logger()


def extract_json_object(text: str) -> str | None:
    """Return the first balanced `{...}` span in `text`, or None.

    Scans from the first `{`, tracking nesting depth and skipping braces that
    appear inside JSON string literals, and stops at the matching `}`. This is a
    span locator only; the span is not validated as JSON here.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]

    return None


def interpret_single(
    raw_text: str,
    event: EventRecord,
    *,
    model: str | None = None,
    cost_usd: float = 0.0,
) -> AnalysisResult:
    """Wrap a single-event analysis reply; the prose itself is the deliverable."""
    return AnalysisResult(
        analysis_text=raw_text,
        event_label=event.label,
        markets_echo=[
            MarketEcho(
                question=market.question,
                outcomes=market.outcomes,
                outcome_prices=market.outcome_prices,
            )
            for market in event.markets
        ],
        model=model,
        cost_usd=cost_usd,
    )


def _fallback(raw_text: str, reason: str) -> ScanResult:
    logger.warning("Scan reply had no usable JSON; keeping raw text", reason=reason)
    return ScanResult(mispriced=[], summary=raw_text)


def interpret_batch(raw_text: str) -> ScanResult:
    """Parse a batch-scan reply into a ScanResult.

    Attempts, in order:
    1. Locate the first balanced JSON object span.
    2. Decode it; it must be an object whose `mispriced` (if present) is a list.
    3. Validate each finding on its own; findings that do not fit the schema are
       dropped and logged, the rest are kept in engine order.
    4. Otherwise return no findings with the entire reply as the summary.
    """
    span = extract_json_object(raw_text)
    if span is None:
        return _fallback(raw_text, "no_object")

    try:
        payload = json.loads(span)
    except json.JSONDecodeError as e:
        return _fallback(raw_text, f"decode_error: {e.msg}")

    if not isinstance(payload, dict):
        return _fallback(raw_text, "not_an_object")

    raw_findings = payload.get("mispriced")
    if raw_findings is None:
        raw_findings = []
    if not isinstance(raw_findings, list):
        return _fallback(raw_text, "mispriced_not_a_list")

    findings: list[MispricingFinding] = []
    for index, item in enumerate(raw_findings):
        try:
            findings.append(MispricingFinding.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "Dropping malformed scan finding",
                index=index,
                errors=e.error_count(),
            )

    try:
        return ScanResult(mispriced=findings, summary=payload.get("summary"))
    except ValidationError as e:
        return _fallback(raw_text, f"schema_error: {e.error_count()} errors")
