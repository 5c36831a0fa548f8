"""Errors raised by the analysis pipeline."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base exception for analysis pipeline errors."""


class InputValidationError(AnalysisError):
    """Caller supplied missing or unusable event data (client error).

    Raised before any reasoning-engine call is made.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
