"""
Provider interfaces and data contracts.

Every quote provider implements the QuoteProvider protocol: it fetches the
whole symbol set in one call and returns one normalized Quote per symbol,
or raises ProviderFailure.

Data is returned via frozen dataclasses for immutability and type safety.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, runtime_checkable


class ProviderName(enum.Enum):
    """Which source produced a resolution. Display/provenance only."""

    FINNHUB = "Finnhub"
    FMP = "FMP"
    TWELVE_DATA = "TwelveData"
    DEMO = "Demo"


class QuoteCascadeError(Exception):
    """Base class for quote_cascade errors."""


class ConfigurationError(QuoteCascadeError):
    """Fatal setup problem (e.g. a symbol with no sample data)."""


class ProviderFailure(QuoteCascadeError):
    """A provider could not produce a full quote set; try the next one."""

    def __init__(self, provider: ProviderName, message: str) -> None:
        super().__init__(f"{provider.value}: {message}")
        self.provider = provider
        self.reason = message


@dataclass(frozen=True)
class Quote:
    """Immutable normalized quote. None means the provider did not supply the value."""

    symbol: str
    price: Optional[float]
    change_percent: Optional[float]

    def has_price(self) -> bool:
        return self.price is not None

    def has_change(self) -> bool:
        return self.change_percent is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "price": self.price,
            "change_percent": self.change_percent,
        }


@dataclass(frozen=True)
class ResolutionResult:
    """Final output of one cascade run: quotes in input order plus provenance."""

    quotes: Tuple[Quote, ...]
    source: ProviderName
    advisory: Optional[str] = None

    @property
    def symbols(self) -> List[str]:
        return [q.symbol for q in self.quotes]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.value,
            "advisory": self.advisory,
            "quotes": [q.to_dict() for q in self.quotes],
        }


@dataclass(frozen=True)
class ProviderAttempt:
    """Tagged result of trying one provider: either quotes or an error message."""

    provider: ProviderName
    quotes: Optional[Tuple[Quote, ...]] = None
    error: Optional[str] = None
    advisory: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.quotes is not None and self.error is None


@runtime_checkable
class QuoteProvider(Protocol):
    """Protocol for quote providers."""

    advisory: Optional[str]

    @property
    def provider_name(self) -> ProviderName: ...

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        """Fetch one Quote per symbol, in order. Raises ProviderFailure."""
        ...
