"""Gamma API errors."""

from __future__ import annotations


class GammaError(Exception):
    """Base exception for Gamma API errors."""


class GammaAPIError(GammaError):
    """Upstream request failed; carries the upstream message."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EventNotFoundError(GammaAPIError):
    """Event slug not found (HTTP 404)."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Event not found: {slug}", status_code=404)
        self.slug = slug
