"""
Static sample quotes: last resort of the cascade and the per-symbol
substitution source for Twelve Data.
"""
from __future__ import annotations

from typing import List, Mapping, Sequence, Tuple

from .base import ConfigurationError, Quote

DEFAULT_SYMBOLS: Tuple[str, ...] = ("AAPL", "MSFT", "GOOGL", "AMZN")

# symbol -> (price, change_percent)
SAMPLE_QUOTES: Mapping[str, Tuple[float, float]] = {
    "AAPL": (228.48, 0.87),
    "MSFT": (452.12, -0.32),
    "GOOGL": (165.39, 0.41),
    "AMZN": (182.77, 1.12),
}


def require_coverage(
    symbols: Sequence[str],
    dataset: Mapping[str, Tuple[float, float]] = SAMPLE_QUOTES,
) -> None:
    """Raise ConfigurationError if any symbol has no sample entry."""
    missing = [s for s in dict.fromkeys(symbols) if s not in dataset]
    if missing:
        raise ConfigurationError(
            f"No sample data for symbol(s): {', '.join(missing)}. "
            f"Known: {sorted(dataset)}"
        )


def sample_price(
    symbol: str,
    dataset: Mapping[str, Tuple[float, float]] = SAMPLE_QUOTES,
) -> float:
    return dataset[symbol][0]


def sample_quotes(
    symbols: Sequence[str],
    dataset: Mapping[str, Tuple[float, float]] = SAMPLE_QUOTES,
) -> List[Quote]:
    """Sample quotes in input order (duplicates preserved)."""
    return [
        Quote(symbol=s, price=dataset[s][0], change_percent=dataset[s][1])
        for s in symbols
    ]
