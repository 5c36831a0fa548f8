"""Reasoning engine backends.

- `ClaudeEngine` (Anthropic) is the real backend.
- `MockEngine` stays available for tests/CI and runs without an API key.
"""

from __future__ import annotations

from ._claude import ClaudeEngine
from ._factory import get_engine
from ._mock import MockCall, MockEngine
from ._pricing import AnthropicPricing
from ._schemas import ReasoningEngine
from .exceptions import ReasoningEngineError

__all__ = [
    "AnthropicPricing",
    "ClaudeEngine",
    "MockCall",
    "MockEngine",
    "ReasoningEngine",
    "ReasoningEngineError",
    "get_engine",
]
