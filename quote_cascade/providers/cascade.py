"""
Quote cascade: ordered provider fallback ending in static sample data.

Providers are tried one at a time in priority order. The first provider
that returns a full, aligned quote set wins and no lower-priority provider
is called. If every provider fails, the sample dataset is returned with an
advisory. resolve() never raises: total failure is a degraded result.
"""
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from .base import (
    ProviderAttempt,
    ProviderFailure,
    ProviderName,
    Quote,
    QuoteProvider,
    ResolutionResult,
)
from .sample_data import DEFAULT_SYMBOLS, SAMPLE_QUOTES, require_coverage, sample_quotes

logger = logging.getLogger(__name__)

DEMO_ADVISORY = "Using local demo data (APIs unavailable)."


class QuoteCascade:
    """
    Ordered chain of quote providers with a static terminus.

    Construction checks that every symbol has sample data and raises
    ConfigurationError otherwise, so a misconfigured symbol list fails at
    startup rather than on a request.
    Providers that substitute sample prices (Twelve Data) are bound to the
    same dataset.
    """

    def __init__(
        self,
        providers: Sequence[QuoteProvider],
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
        credential: Optional[str] = None,
        sample_data: Mapping[str, Tuple[float, float]] = SAMPLE_QUOTES,
    ) -> None:
        require_coverage(symbols, sample_data)
        self._providers = list(providers)
        # One dataset for the terminus and for per-symbol substitution.
        for provider in self._providers:
            if hasattr(provider, "sample_data"):
                provider.sample_data = sample_data
        self._symbols: Tuple[str, ...] = tuple(symbols)
        self._credential = credential
        self._sample_data = sample_data
        self._last_attempts: List[ProviderAttempt] = []

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def provider_names(self) -> List[ProviderName]:
        return [p.provider_name for p in self._providers]

    @property
    def last_attempts(self) -> List[ProviderAttempt]:
        """Attempts made by the most recent resolve() call."""
        return list(self._last_attempts)

    def attempt(self, provider: QuoteProvider) -> ProviderAttempt:
        """Run one provider and fold its outcome into a ProviderAttempt."""
        name = provider.provider_name
        try:
            quotes = provider.fetch(self._symbols, self._credential)
        except ProviderFailure as exc:
            return ProviderAttempt(provider=name, error=exc.reason)
        except Exception as exc:
            logger.exception("Quote provider %s raised unexpectedly", name.value)
            return ProviderAttempt(provider=name, error=f"{type(exc).__name__}: {exc}")

        aligned = self._check_alignment(quotes)
        if aligned is not None:
            return ProviderAttempt(provider=name, error=aligned)
        return ProviderAttempt(
            provider=name,
            quotes=tuple(quotes),
            advisory=getattr(provider, "advisory", None),
        )

    def _check_alignment(self, quotes: Sequence[Quote]) -> Optional[str]:
        """Error message if quotes are not one-per-symbol in input order, else None."""
        if len(quotes) != len(self._symbols):
            return f"returned {len(quotes)} quotes for {len(self._symbols)} symbols"
        for expected, quote in zip(self._symbols, quotes):
            if quote.symbol != expected:
                return f"quote for {quote.symbol} where {expected} was expected"
        return None

    def resolve(self) -> ResolutionResult:
        """Resolve quotes for the configured symbols. Never raises."""
        attempts: List[ProviderAttempt] = []
        self._last_attempts = attempts
        for provider in self._providers:
            result = self.attempt(provider)
            attempts.append(result)
            if result.ok:
                logger.debug("Resolved %d quotes via %s", len(self._symbols), result.provider.value)
                return ResolutionResult(
                    quotes=result.quotes or (),
                    source=result.provider,
                    advisory=result.advisory,
                )
            logger.warning("Quote provider %s failed: %s", result.provider.value, result.error)

        errors = [f"{a.provider.value}: {a.error}" for a in attempts]
        logger.warning(
            "All quote providers failed, using sample data: %s",
            "; ".join(errors) or "no providers configured",
        )
        return ResolutionResult(
            quotes=tuple(sample_quotes(self._symbols, self._sample_data)),
            source=ProviderName.DEMO,
            advisory=DEMO_ADVISORY,
        )
