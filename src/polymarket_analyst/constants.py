"""Centralized policy constants for the Polymarket analyst.

Policy-encoding literals shared between the prompt composer, the pipeline, the
engine providers and the CLI live here so they cannot drift apart.
"""

from __future__ import annotations

# =============================================================================
# Reasoning engine
# =============================================================================

# Default Anthropic model for both analysis and scan calls.
#
# Override per run with POLYMARKET_ENGINE_MODEL.
DEFAULT_ENGINE_MODEL: str = "claude-sonnet-4-20250514"

# Output token budget for a single-event deep analysis (prose reply).
ANALYZE_MAX_TOKENS: int = 1500

# Output token budget for a multi-event batch scan (JSON reply covering many events).
SCAN_MAX_TOKENS: int = 4000

# =============================================================================
# Mispricing policy
# =============================================================================

# Minimum discrepancy (percentage points between market odds and fair value) the
# engine is asked to report in a batch scan.
#
# This is an instruction to the engine, not a gate: findings are NOT re-validated
# numerically because currentOdds / fairOdds are free text.
MISPRICING_THRESHOLD_PCT: int = 30

# Closed verdict set for single-event analysis.
VERDICTS: tuple[str, ...] = ("MISPRICED", "FAIR", "UNCERTAIN")

# =============================================================================
# Gamma API (market data source)
# =============================================================================

DEFAULT_GAMMA_BASE_URL: str = "https://gamma-api.polymarket.com"

# Default page sizes, matching the public Gamma API conventions.
DEFAULT_EVENTS_LIMIT: int = 50
DEFAULT_MARKETS_LIMIT: int = 100
