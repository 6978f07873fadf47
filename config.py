"""Process configuration for the Unusual Whales MCP server."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.unusualwhales.com"
DEFAULT_TIMEOUT = 30.0


class StartupConfigError(RuntimeError):
    """Raised when required process configuration is missing."""


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    value = environ.get(name)
    if not value:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class Settings:
    """Settings fixed once at startup and shared read-only by every call."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Raises:
            StartupConfigError: If UNUSUAL_WHALES_API_KEY is missing or blank.
        """
        env = os.environ if environ is None else environ
        api_key = env.get("UNUSUAL_WHALES_API_KEY", "").strip()
        if not api_key:
            raise StartupConfigError("UNUSUAL_WHALES_API_KEY is required")

        return cls(
            api_key=api_key,
            base_url=(env.get("UNUSUAL_WHALES_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout=_env_float(env, "UNUSUAL_WHALES_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
