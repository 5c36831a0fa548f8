"""Market analysis pipeline: normalization, context, prompts, interpretation."""

from __future__ import annotations

from .context import build_context
from .exceptions import AnalysisError, InputValidationError
from .interpret import extract_json_object, interpret_batch, interpret_single
from .normalize import normalize_array_field
from .pipeline import MarketAnalyzer, to_event_record
from .prompts import build_scan_projection, compose_analysis_prompt, compose_scan_prompt
from .records import EventRecord, MarketRecord
from .schemas import AnalysisResult, MarketEcho, MispricingFinding, ScanResult

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "EventRecord",
    "InputValidationError",
    "MarketAnalyzer",
    "MarketEcho",
    "MarketRecord",
    "MispricingFinding",
    "ScanResult",
    "build_context",
    "build_scan_projection",
    "compose_analysis_prompt",
    "compose_scan_prompt",
    "extract_json_object",
    "interpret_batch",
    "interpret_single",
    "normalize_array_field",
    "to_event_record",
]
