"""Environment-driven settings."""
from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Settings read from ``PRICETAG_*`` environment variables."""
    data_source: str | None = None
    http_timeout: float = 10.0
    log_invalid: bool = True
    warn_throttle: float = 60.0


def _env(key: str) -> str | None:
    value = os.environ.get(key, "").strip()
    return value or None


def _env_float(key: str, default: float) -> float:
    value = _env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be a number") from exc


def _env_bool(key: str, default: bool) -> bool:
    value = _env(key)
    if value is None:
        return default
    if value.lower() in _TRUE:
        return True
    if value.lower() in _FALSE:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        ValueError: If a variable is set but malformed.
    """
    return Settings(
        data_source=_env("PRICETAG_DATA"),
        http_timeout=_env_float("PRICETAG_HTTP_TIMEOUT", 10.0),
        log_invalid=_env_bool("PRICETAG_LOG_INVALID", True),
        warn_throttle=max(0.0, _env_float("PRICETAG_WARN_THROTTLE", 60.0)),
    )
