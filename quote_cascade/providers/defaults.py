"""
Default provider registry configuration.

Registers the built-in providers and builds the cascade from config.yaml
settings. To add a new provider, register it here and add it to the
priority list.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from quote_cascade import config

from .cascade import QuoteCascade
from .finnhub import FinnhubQuoteProvider
from .fmp import FmpQuoteProvider
from .registry import ProviderRegistry
from .twelvedata import TwelveDataQuoteProvider

logger = logging.getLogger(__name__)

# Default provider priority (config.yaml can override this)
DEFAULT_PRIORITY = ["finnhub", "fmp", "twelvedata"]


def create_default_registry(
    timeout_s: Optional[float] = None,
    max_workers: Optional[int] = None,
) -> ProviderRegistry:
    """Create a registry with all built-in providers."""
    timeout = timeout_s if timeout_s is not None else config.http_timeout_s()
    workers = max_workers if max_workers is not None else config.max_workers()

    registry = ProviderRegistry()
    registry.register(
        "finnhub",
        lambda: FinnhubQuoteProvider(timeout_s=timeout, max_workers=workers),
    )
    registry.register(
        "fmp",
        lambda: FmpQuoteProvider(api_key=config.fmp_api_key(), timeout_s=timeout),
    )
    registry.register(
        "twelvedata",
        lambda: TwelveDataQuoteProvider(
            api_key=config.twelvedata_api_key(), timeout_s=timeout, max_workers=workers
        ),
    )
    return registry


def create_cascade(
    symbols: Optional[Sequence[str]] = None,
    credential: Optional[str] = None,
    priority: Optional[List[str]] = None,
    registry: Optional[ProviderRegistry] = None,
    timeout_s: Optional[float] = None,
) -> QuoteCascade:
    """Build a QuoteCascade from config. Raises ConfigurationError on bad setup."""
    reg = registry or create_default_registry(timeout_s=timeout_s)
    order = priority or config.provider_priority() or DEFAULT_PRIORITY
    providers = reg.build_chain(order)
    logger.debug("Quote provider order: %s", [p.provider_name.value for p in providers])
    return QuoteCascade(
        providers=providers,
        symbols=list(symbols) if symbols else config.symbols(),
        credential=credential if credential is not None else config.finnhub_api_key(),
    )
