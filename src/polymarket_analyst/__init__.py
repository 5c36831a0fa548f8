"""
Polymarket Analyst.

Normalizes Polymarket market data, asks a reasoning engine whether the odds look
mispriced, and turns its replies into structured findings.
"""

__version__ = "0.1.0"

from polymarket_analyst.analysis import AnalysisResult, MarketAnalyzer, ScanResult
from polymarket_analyst.engine import get_engine
from polymarket_analyst.gamma import GammaClient

# Configure structlog once at import time (quiet by default).
from polymarket_analyst.logging import configure_structlog

configure_structlog()

__all__ = [
    "AnalysisResult",
    "GammaClient",
    "MarketAnalyzer",
    "ScanResult",
    "__version__",
    "get_engine",
]
