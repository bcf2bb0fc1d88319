"""
Provider registry: central catalog of available quote providers.

Providers register a factory under a short name. A priority list of names
(from config.yaml) determines the order the cascade tries them in.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Union

from .base import ConfigurationError, QuoteProvider

logger = logging.getLogger(__name__)

ProviderFactory = Union[Callable[[], QuoteProvider], QuoteProvider]


class ProviderRegistry:
    """
    Registry mapping provider names to factories/instances.

    Usage:
        registry = ProviderRegistry()
        registry.register("finnhub", FinnhubQuoteProvider)
        registry.register("fmp", FmpQuoteProvider)

        providers = registry.build_chain(["finnhub", "fmp"])
    """

    def __init__(self) -> None:
        self._factories: Dict[str, ProviderFactory] = {}
        self._instances: Dict[str, QuoteProvider] = {}

    def register(self, name: str, factory: ProviderFactory) -> None:
        """Register a provider by name. Re-registering replaces the old entry."""
        self._factories[name] = factory
        self._instances.pop(name, None)
        logger.debug("Registered quote provider: %s", name)

    def get(self, name: str) -> QuoteProvider:
        """Get or instantiate a provider by name."""
        if name not in self._instances:
            factory = self._factories.get(name)
            if factory is None:
                raise ConfigurationError(
                    f"Unknown quote provider '{name}'. "
                    f"Available: {list(self._factories)}"
                )
            if isinstance(factory, type) or not hasattr(factory, "fetch"):
                self._instances[name] = factory()  # type: ignore[operator]
            else:
                self._instances[name] = factory  # type: ignore[assignment]
        return self._instances[name]

    @property
    def names(self) -> List[str]:
        return list(self._factories)

    def build_chain(self, priority: Optional[List[str]] = None) -> List[QuoteProvider]:
        """Ordered provider list. Unknown names in priority are a ConfigurationError."""
        names = priority or list(self._factories)
        return [self.get(n) for n in dict.fromkeys(names)]
