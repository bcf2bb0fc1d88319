"""
Quote providers and the fallback cascade.

Providers are registered by name and tried in a config-driven priority
order (Finnhub -> FMP -> Twelve Data), ending in static sample data.
"""

from __future__ import annotations

from .base import (
    ConfigurationError,
    ProviderAttempt,
    ProviderFailure,
    ProviderName,
    Quote,
    QuoteCascadeError,
    QuoteProvider,
    ResolutionResult,
)
from .cascade import DEMO_ADVISORY, QuoteCascade
from .defaults import create_cascade, create_default_registry
from .finnhub import FinnhubQuoteProvider
from .fmp import FmpQuoteProvider
from .registry import ProviderRegistry
from .sample_data import DEFAULT_SYMBOLS, SAMPLE_QUOTES
from .twelvedata import TwelveDataQuoteProvider

__all__ = [
    "Quote",
    "ResolutionResult",
    "ProviderAttempt",
    "ProviderName",
    "QuoteProvider",
    "QuoteCascadeError",
    "ConfigurationError",
    "ProviderFailure",
    "QuoteCascade",
    "DEMO_ADVISORY",
    "ProviderRegistry",
    "create_cascade",
    "create_default_registry",
    "FinnhubQuoteProvider",
    "FmpQuoteProvider",
    "TwelveDataQuoteProvider",
    "DEFAULT_SYMBOLS",
    "SAMPLE_QUOTES",
]
