from __future__ import annotations

import os
from typing import Optional

from .domain.exceptions import ConfigurationError
from .settings import TokenSettings


def settings_from_env() -> TokenSettings:
    """
    Build TokenSettings from the environment.

    TOKEN_SECRET       signing secret (required)
    TOKEN_TTL_SECONDS  default lifetime of issued tokens; 0 or empty means
                       no expiry. Defaults to 3600 when unset.
    """
    def _ttl(key: str, default: Optional[int]) -> Optional[int]:
        raw = os.getenv(key)
        if raw is None:
            return default
        raw = raw.strip()
        if not raw:
            return None
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None
        if value < 0:
            raise ConfigurationError(f"{key} must not be negative, got {value}")
        return value or None

    secret = os.getenv("TOKEN_SECRET")
    if not secret:
        raise ConfigurationError("Missing token settings: TOKEN_SECRET")

    return TokenSettings(
        secret=secret,
        default_ttl_seconds=_ttl("TOKEN_TTL_SECONDS", 3600),
    )
