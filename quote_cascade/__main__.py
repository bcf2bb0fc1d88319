"""Allow python -m quote_cascade to resolve and print quotes."""
from __future__ import annotations

from .cli.quotes import main

if __name__ == "__main__":
    raise SystemExit(main())
