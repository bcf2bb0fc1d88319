"""
Finnhub quote provider (primary, requires an API token).

Uses the Finnhub REST API, one request per symbol:
  GET https://finnhub.io/api/v1/quote?symbol={symbol}&token={token}

Fails as a whole if any symbol fails; partial Finnhub results are not used.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .base import ProviderFailure, ProviderName, Quote
from .http import DEFAULT_MAX_WORKERS, HTTP_TIMEOUT_S, fan_out, get_json, to_float

logger = logging.getLogger(__name__)

FINNHUB_QUOTE_URL = "https://finnhub.io/api/v1/quote"


def change_percent(current: float, previous_close: Optional[float]) -> Optional[float]:
    """Percent change vs previous close; 0.0 when previous close is zero."""
    if previous_close is None:
        return None
    if previous_close == 0:
        return 0.0
    return (current - previous_close) / previous_close * 100


class FinnhubQuoteProvider:
    """Fetch current/previous-close quotes from Finnhub and derive change percent."""

    advisory: Optional[str] = None

    def __init__(
        self,
        timeout_s: float = HTTP_TIMEOUT_S,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self.timeout_s = timeout_s
        self.max_workers = max_workers

    @property
    def provider_name(self) -> ProviderName:
        return ProviderName.FINNHUB

    def _parse(self, symbol: str, data: Any) -> Quote:
        if not isinstance(data, dict):
            raise ProviderFailure(self.provider_name, f"unexpected response type for {symbol}")
        if data.get("c") is None:
            raise ProviderFailure(self.provider_name, f"response missing 'c' for {symbol}")
        price = to_float(data.get("c"))
        if price is None:
            raise ProviderFailure(self.provider_name, f"non-numeric price for {symbol}")
        prev = to_float(data.get("pc"))
        # Finnhub answers unknown symbols with an all-zero quote.
        if price == 0 and not prev:
            raise ProviderFailure(self.provider_name, f"no quote data for {symbol}")
        if prev is None:
            logger.debug("Finnhub response for %s has no previous close", symbol)
        return Quote(symbol=symbol, price=price, change_percent=change_percent(price, prev))

    def _fetch_one(self, symbol: str, token: str) -> Quote:
        data = get_json(
            self.provider_name,
            FINNHUB_QUOTE_URL,
            params={"symbol": symbol, "token": token},
            timeout_s=self.timeout_s,
        )
        return self._parse(symbol, data)

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        token = (credential or "").strip()
        if not token:
            raise ProviderFailure(self.provider_name, "no API key configured")
        if not symbols:
            raise ProviderFailure(self.provider_name, "no symbols requested")
        return fan_out(symbols, lambda sym: self._fetch_one(sym, token), self.max_workers)
