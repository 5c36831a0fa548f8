"""Factory function for reasoning engine backends."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ._claude import ClaudeEngine
from ._mock import MockEngine

if TYPE_CHECKING:
    from ._schemas import ReasoningEngine


def get_engine(backend: str | None = None, *, model: str | None = None) -> ReasoningEngine:
    """Construct a reasoning engine from config.

    Args:
        backend: Explicit backend override ("anthropic" or "mock"). When None, reads
            POLYMARKET_ENGINE_BACKEND (default: "anthropic").
        model: Optional model override for the Anthropic backend.

    Returns:
        A reasoning engine instance.
    """
    backend_raw = backend
    if backend_raw is None:
        backend_raw = os.getenv("POLYMARKET_ENGINE_BACKEND") or "anthropic"
    backend_value = backend_raw.strip().lower()

    if backend_value == "mock":
        return MockEngine()
    if backend_value == "anthropic":
        return ClaudeEngine(model=model)

    raise ValueError(f"Unknown engine backend: {backend_value!r}")
