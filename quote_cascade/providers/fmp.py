"""
Financial Modeling Prep quote provider (secondary, keyless demo endpoint).

One batched request for every symbol:
  GET https://financialmodelingprep.com/api/v3/quote/{S1,S2,...}?apikey=demo

changesPercentage is already a percent and is passed through unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Set

from .base import ProviderFailure, ProviderName, Quote
from .http import HTTP_TIMEOUT_S, get_json, to_float

logger = logging.getLogger(__name__)

FMP_BASE_URL = "https://financialmodelingprep.com"
FMP_DEMO_KEY = "demo"


class FmpQuoteProvider:
    """Fetch batched quotes from Financial Modeling Prep."""

    advisory: Optional[str] = None

    def __init__(self, api_key: str = FMP_DEMO_KEY, timeout_s: float = HTTP_TIMEOUT_S) -> None:
        self.api_key = api_key or FMP_DEMO_KEY
        self.timeout_s = timeout_s

    @property
    def provider_name(self) -> ProviderName:
        return ProviderName.FMP

    def _index_items(self, data: Any, requested: Set[str]) -> Dict[str, Dict[str, Any]]:
        if isinstance(data, dict) and data.get("Error Message"):
            raise ProviderFailure(self.provider_name, "API error response")
        if not isinstance(data, list):
            raise ProviderFailure(self.provider_name, f"unexpected response type {type(data).__name__}")
        if not data:
            raise ProviderFailure(self.provider_name, "empty result set")

        items: Dict[str, Dict[str, Any]] = {}
        for item in data:
            if not isinstance(item, dict) or not item.get("symbol"):
                raise ProviderFailure(self.provider_name, "result item without symbol")
            sym = str(item["symbol"])
            if sym in items and sym in requested:
                raise ProviderFailure(self.provider_name, f"duplicate result for {sym}")
            items[sym] = item
        return items

    def _to_quote(self, symbol: str, item: Dict[str, Any]) -> Quote:
        price = to_float(item.get("price"))
        if price is None:
            raise ProviderFailure(self.provider_name, f"missing or non-numeric price for {symbol}")
        raw_change = item.get("changesPercentage")
        change = to_float(raw_change)
        if raw_change is not None and change is None:
            raise ProviderFailure(self.provider_name, f"non-numeric changesPercentage for {symbol}")
        return Quote(symbol=symbol, price=price, change_percent=change)

    def fetch(self, symbols: Sequence[str], credential: Optional[str] = None) -> List[Quote]:
        if not symbols:
            raise ProviderFailure(self.provider_name, "no symbols requested")
        batch = ",".join(dict.fromkeys(symbols))
        data = get_json(
            self.provider_name,
            f"{FMP_BASE_URL}/api/v3/quote/{batch}",
            params={"apikey": self.api_key},
            timeout_s=self.timeout_s,
        )
        items = self._index_items(data, set(symbols))

        missing = [s for s in dict.fromkeys(symbols) if s not in items]
        if missing:
            raise ProviderFailure(self.provider_name, f"no result for {', '.join(missing)}")
        extra = set(items) - set(symbols)
        if extra:
            logger.debug("FMP returned unrequested symbols: %s", sorted(extra))

        return [self._to_quote(s, items[s]) for s in symbols]
