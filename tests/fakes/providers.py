"""
Fake quote providers for tests: deterministic data, fail-N-then-succeed, always-fail.

No live network; used by the cascade and fake-provider tests.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from quote_cascade.providers.base import ProviderFailure, ProviderName, Quote

# Deterministic prices for reproducible tests.
FAKE_PRICES: Dict[str, float] = {
    "AAPL": 110.0,
    "MSFT": 400.0,
    "GOOGL": 150.0,
    "AMZN": 180.0,
}


# ---------------------------------------------------------------------------
# Always succeed with deterministic data
# ---------------------------------------------------------------------------


class FakeQuoteProvider:
    """Provider that always returns one deterministic quote per symbol. No network."""

    def __init__(
        self,
        name: ProviderName = ProviderName.FINNHUB,
        prices: Dict[str, float] | None = None,
        *,
        change_percent: Optional[float] = 1.0,
        advisory: Optional[str] = None,
    ):
        self._name = name
        self._prices = prices or dict(FAKE_PRICES)
        self._change = change_percent
        self.advisory = advisory
        self.call_count = 0
        self.calls: List[tuple] = []

    @property
    def provider_name(self) -> ProviderName:
        return self._name

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        self.call_count += 1
        self.calls.append((tuple(symbols), credential))
        return [
            Quote(symbol=s, price=self._prices.get(s, 100.0), change_percent=self._change)
            for s in symbols
        ]


# ---------------------------------------------------------------------------
# Fail N times then succeed
# ---------------------------------------------------------------------------


class FakeQuoteProviderFailNThenSucceed(FakeQuoteProvider):
    """Provider that raises ProviderFailure on the first N calls, then behaves like FakeQuoteProvider."""

    def __init__(self, name: ProviderName, fail_times: int, prices: Dict[str, float] | None = None):
        super().__init__(name, prices)
        self._fail_times = fail_times

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        if self.call_count < self._fail_times:
            self.call_count += 1
            raise ProviderFailure(self._name, f"simulated failure #{self.call_count}")
        return super().fetch(symbols, credential)


# ---------------------------------------------------------------------------
# Always fail
# ---------------------------------------------------------------------------


class FakeQuoteProviderAlwaysFail:
    """Provider that always raises ProviderFailure. No network."""

    advisory: Optional[str] = None

    def __init__(self, name: ProviderName = ProviderName.FMP):
        self._name = name
        self.call_count = 0

    @property
    def provider_name(self) -> ProviderName:
        return self._name

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        self.call_count += 1
        raise ProviderFailure(self._name, "always fails")


# ---------------------------------------------------------------------------
# Misbehaving: wrong shape or unexpected exception
# ---------------------------------------------------------------------------


class FakeQuoteProviderMisaligned(FakeQuoteProvider):
    """Provider that drops the last symbol and reverses the rest."""

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        quotes = super().fetch(symbols, credential)
        return list(reversed(quotes[:-1]))


class FakeQuoteProviderCrashes(FakeQuoteProvider):
    """Provider with a bug: raises something other than ProviderFailure."""

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        self.call_count += 1
        raise KeyError("boom")
