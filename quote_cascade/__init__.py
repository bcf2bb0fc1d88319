"""
Top-level public API surface.
Canonical entrypoint: quote_cascade.resolve_quotes() or quote_cascade.providers.create_cascade().
Does not import cli.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .providers import (
    ConfigurationError,
    ProviderName,
    Quote,
    ResolutionResult,
    create_cascade,
)

__version__ = "0.1.0"


def resolve_quotes(
    symbols: Optional[Sequence[str]] = None,
    credential: Optional[str] = None,
) -> ResolutionResult:
    """One-shot resolution using config defaults for anything not given."""
    return create_cascade(symbols=symbols, credential=credential).resolve()


# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "ConfigurationError",
    "ProviderName",
    "Quote",
    "ResolutionResult",
    "create_cascade",
    "resolve_quotes",
]
