"""Fake providers for cascade tests (no live network)."""

from .providers import (
    FAKE_PRICES,
    FakeQuoteProvider,
    FakeQuoteProviderAlwaysFail,
    FakeQuoteProviderCrashes,
    FakeQuoteProviderFailNThenSucceed,
    FakeQuoteProviderMisaligned,
)

__all__ = [
    "FAKE_PRICES",
    "FakeQuoteProvider",
    "FakeQuoteProviderAlwaysFail",
    "FakeQuoteProviderCrashes",
    "FakeQuoteProviderFailNThenSucceed",
    "FakeQuoteProviderMisaligned",
]
