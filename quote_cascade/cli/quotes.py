#!/usr/bin/env python3
"""
Quotes:
- Resolve current quotes for the configured symbols (Finnhub -> FMP -> Twelve Data -> sample data)
- Print the data source, any advisory, and a symbol/price/change table (or JSON with --json)

Exit code is 0 for every resolution, degraded ones included; 2 on configuration errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from quote_cascade.providers.base import ConfigurationError, ResolutionResult
from quote_cascade.providers.defaults import create_cascade

_MISSING = "—"


def _fmt_price(value: Optional[float]) -> str:
    return _MISSING if value is None else f"${value:.2f}"


def _fmt_change(value: Optional[float]) -> str:
    return _MISSING if value is None else f"{value:.2f}%"


def format_result(result: ResolutionResult) -> str:
    lines = [f"Data source: {result.source.value}"]
    if result.advisory:
        lines.append(result.advisory)
    lines.append("")
    lines.append(f"{'Symbol':<8} {'Price':>12} {'Change %':>10}")
    for q in result.quotes:
        lines.append(f"{q.symbol:<8} {_fmt_price(q.price):>12} {_fmt_change(q.change_percent):>10}")
    return "\n".join(lines)


def _parse_symbols(raw: Optional[str]) -> Optional[List[str]]:
    if not raw:
        return None
    return [s.strip() for s in raw.split(",") if s.strip()] or None


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="quote-cascade",
        description="Resolve stock quotes through the provider fallback cascade",
    )
    parser.add_argument("--symbols", help="Comma-separated symbols (default: config symbols)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request HTTP timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cascade = create_cascade(symbols=_parse_symbols(args.symbols), timeout_s=args.timeout)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    result = cascade.resolve()
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
