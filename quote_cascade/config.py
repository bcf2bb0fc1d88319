"""
Load config from config.yaml with optional env overrides.
Single source of truth for the symbol list, provider order, keys and HTTP limits.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import yaml

from quote_cascade.providers.base import ConfigurationError

# Defaults if no YAML or env
_DEFAULTS = {
    "symbols": ["AAPL", "MSFT", "GOOGL", "AMZN"],
    "http": {"timeout_s": 10.0, "max_workers": 4},
    "providers": {
        "priority": ["finnhub", "fmp", "twelvedata"],
        "finnhub_api_key": None,
        "fmp_api_key": "demo",
        "twelvedata_api_key": "demo",
    },
}


def _config_yaml_path() -> Path:
    """config.yaml lives at repo root (parent of package dir); QUOTES_CONFIG overrides."""
    override = os.environ.get("QUOTES_CONFIG")
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    symbols_env = os.environ.get("QUOTES_SYMBOLS")
    if symbols_env:
        overrides["symbols"] = [s.strip() for s in symbols_env.split(",") if s.strip()]
    timeout = os.environ.get("QUOTES_HTTP_TIMEOUT")
    if timeout:
        try:
            overrides.setdefault("http", {})["timeout_s"] = float(timeout)
        except ValueError as exc:
            raise ConfigurationError(f"QUOTES_HTTP_TIMEOUT must be a number, got {timeout!r}") from exc
    key = os.environ.get("QUOTES_FINNHUB_API_KEY") or os.environ.get("FINNHUB_API_KEY")
    if key:
        overrides.setdefault("providers", {})["finnhub_api_key"] = key
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def symbols() -> List[str]:
    return [str(s) for s in get_config()["symbols"]]


def http_timeout_s() -> float:
    return float(get_config()["http"]["timeout_s"])


def max_workers() -> int:
    return int(get_config()["http"]["max_workers"])


def provider_priority() -> List[str]:
    return list(get_config()["providers"]["priority"])


def finnhub_api_key() -> Optional[str]:
    key = get_config()["providers"].get("finnhub_api_key")
    return str(key).strip() if key else None


def fmp_api_key() -> str:
    return str(get_config()["providers"].get("fmp_api_key") or "demo")


def twelvedata_api_key() -> str:
    return str(get_config()["providers"].get("twelvedata_api_key") or "demo")
