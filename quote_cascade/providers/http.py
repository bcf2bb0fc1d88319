"""
Shared HTTP and fan-out helpers for quote providers.

get_json() performs one bounded GET and classifies every failure mode as a
ProviderFailure. fan_out() runs a per-symbol fetch concurrently and joins the
results into an indexed slot list, so output order is input order regardless
of completion order.
"""
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

import requests

from .base import ProviderFailure, ProviderName

logger = logging.getLogger(__name__)

HTTP_TIMEOUT_S = 10.0
DEFAULT_MAX_WORKERS = 4

T = TypeVar("T")


def to_float(x: Any) -> Optional[float]:
    """Finite float or None (rejects bools, NaN and infinities)."""
    if x is None or isinstance(x, bool):
        return None
    try:
        value = float(x)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def get_json(
    provider: ProviderName,
    url: str,
    params: Optional[Dict[str, str]] = None,
    timeout_s: float = HTTP_TIMEOUT_S,
) -> Any:
    """GET url and decode JSON. Raises ProviderFailure on any transport or status error."""
    # Exception text may carry the query string (and a token), so only type names are kept.
    try:
        resp = requests.get(url, params=params, timeout=timeout_s)
    except requests.Timeout as exc:
        raise ProviderFailure(provider, f"timed out after {timeout_s:g}s") from exc
    except requests.RequestException as exc:
        raise ProviderFailure(provider, f"request failed ({type(exc).__name__})") from exc

    if resp.status_code == 429:
        raise ProviderFailure(provider, "rate limit (HTTP 429)")
    if resp.status_code >= 400:
        raise ProviderFailure(provider, f"HTTP {resp.status_code}")

    try:
        return resp.json()
    except ValueError as exc:
        raise ProviderFailure(provider, "response is not valid JSON") from exc


def fan_out(
    symbols: Sequence[str],
    fetch_one: Callable[[str], T],
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> List[T]:
    """
    Call fetch_one(symbol) concurrently for every symbol.

    The first exception raised by fetch_one propagates; requests that have
    not started yet are cancelled and running ones are joined before return.
    """
    if not symbols:
        return []
    slots: List[Optional[T]] = [None] * len(symbols)
    workers = max(1, min(max_workers, len(symbols)))
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="quote-fetch")
    try:
        futures = {executor.submit(fetch_one, sym): idx for idx, sym in enumerate(symbols)}
        for fut in as_completed(futures):
            slots[futures[fut]] = fut.result()
    finally:
        executor.shutdown(wait=True, cancel_futures=True)
    return slots  # type: ignore[return-value]
