"""
Twelve Data price provider (tertiary, price-only demo endpoint).

One request per symbol:
  GET https://api.twelvedata.com/price?symbol={symbol}&apikey=demo

The demo key often misses symbols. Unlike the other providers, a failed
symbol is filled with its sample price instead of failing the whole call;
the provider only fails when no symbol got a live price (a result made
only of sample prices is left to the Demo terminus, which also carries
change values). Change percent is always 0.0 since the endpoint carries none.
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .base import ProviderFailure, ProviderName, Quote
from .http import DEFAULT_MAX_WORKERS, HTTP_TIMEOUT_S, fan_out, get_json, to_float
from .sample_data import SAMPLE_QUOTES, sample_price

logger = logging.getLogger(__name__)

TWELVEDATA_PRICE_URL = "https://api.twelvedata.com/price"
TWELVEDATA_DEMO_KEY = "demo"
TWELVEDATA_ADVISORY = "TwelveData demo in use; missing quotes filled with sample prices."


class TwelveDataQuoteProvider:
    """Fetch last prices from Twelve Data, substituting sample prices per symbol."""

    advisory: Optional[str] = TWELVEDATA_ADVISORY

    def __init__(
        self,
        api_key: str = TWELVEDATA_DEMO_KEY,
        timeout_s: float = HTTP_TIMEOUT_S,
        max_workers: int = DEFAULT_MAX_WORKERS,
        sample_data: Mapping[str, Tuple[float, float]] = SAMPLE_QUOTES,
    ) -> None:
        self.api_key = api_key or TWELVEDATA_DEMO_KEY
        self.timeout_s = timeout_s
        self.max_workers = max_workers
        self.sample_data = sample_data

    @property
    def provider_name(self) -> ProviderName:
        return ProviderName.TWELVE_DATA

    def _live_price(self, symbol: str) -> float:
        data: Any = get_json(
            self.provider_name,
            TWELVEDATA_PRICE_URL,
            params={"symbol": symbol, "apikey": self.api_key},
            timeout_s=self.timeout_s,
        )
        if not isinstance(data, dict):
            raise ProviderFailure(self.provider_name, f"unexpected response type for {symbol}")
        if data.get("status") == "error":
            raise ProviderFailure(self.provider_name, f"API error for {symbol}: {data.get('message', '')}")
        price = to_float(data.get("price"))
        if price is None:
            raise ProviderFailure(self.provider_name, f"missing or non-numeric price for {symbol}")
        return price

    def _fetch_one(self, symbol: str) -> Tuple[Quote, bool]:
        """Quote for symbol and whether it came from the live endpoint."""
        try:
            price = self._live_price(symbol)
            live = True
        except ProviderFailure as exc:
            logger.info("Twelve Data: using sample price for %s (%s)", symbol, exc.reason)
            price = sample_price(symbol, self.sample_data)
            live = False
        return Quote(symbol=symbol, price=price, change_percent=0.0), live

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        if not symbols:
            raise ProviderFailure(self.provider_name, "no symbols requested")
        results = fan_out(symbols, self._fetch_one, self.max_workers)
        if not any(live for _, live in results):
            raise ProviderFailure(self.provider_name, "no live price for any symbol")
        return [quote for quote, _ in results]
