from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class TokenSettings:
    """
    Signing secret + issuing defaults.

    Host code decides how to construct this (env, config file, etc.).
    """
    secret: str

    # Applied by TokenService.issue when no explicit TTL is given;
    # None issues tokens without `exp`.
    default_ttl_seconds: Optional[int] = 3600
