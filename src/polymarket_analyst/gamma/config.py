"""Configuration for the Polymarket Gamma API client."""

from __future__ import annotations

import os
from dataclasses import dataclass

from polymarket_analyst.constants import DEFAULT_GAMMA_BASE_URL


@dataclass(frozen=True)
class GammaConfig:
    """Configuration for the (public, unauthenticated) Gamma API client."""

    base_url: str = DEFAULT_GAMMA_BASE_URL
    timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls) -> GammaConfig:
        """Load configuration from environment variables.

        Optional:
            POLYMARKET_GAMMA_URL: Override base URL (default: https://gamma-api.polymarket.com)
            POLYMARKET_GAMMA_TIMEOUT: Request timeout in seconds (default: 30)
        """
        raw_timeout = os.environ.get("POLYMARKET_GAMMA_TIMEOUT", "30")
        try:
            timeout_seconds = float(raw_timeout)
        except ValueError as e:
            raise ValueError("POLYMARKET_GAMMA_TIMEOUT must be a number of seconds") from e
        if timeout_seconds <= 0:
            raise ValueError("POLYMARKET_GAMMA_TIMEOUT must be positive")

        return cls(
            base_url=os.environ.get("POLYMARKET_GAMMA_URL", DEFAULT_GAMMA_BASE_URL).rstrip("/"),
            timeout_seconds=timeout_seconds,
        )
