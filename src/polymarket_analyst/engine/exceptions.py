"""Reasoning engine errors."""

from __future__ import annotations


class ReasoningEngineError(Exception):
    """The reasoning engine call failed (network, timeout, quota, empty reply).

    Not retried; callers report it as a service error.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
