"""Polymarket Gamma API client (market data source)."""

from __future__ import annotations

from .client import GammaClient
from .config import GammaConfig
from .exceptions import EventNotFoundError, GammaAPIError, GammaError

__all__ = [
    "EventNotFoundError",
    "GammaAPIError",
    "GammaClient",
    "GammaConfig",
    "GammaError",
]
