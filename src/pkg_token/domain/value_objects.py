# src/pkg_token/domain/value_objects.py

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .constants import RESERVED_CLAIMS, ReservedClaim
from .exceptions import MalformedTokenError

ClaimValue = Union[str, int, float, bool]

Secret = Union[str, bytes]

_SCALAR_TYPES = (str, int, float, bool)


# --- Claim validation ----------------------------------------------------


def validate_claim(key: Any, value: Any) -> None:
    """
    Check a single user claim.

    Keys must be strings outside the reserved set; values must be plain
    scalars (str, int, float, bool) and floats must be finite.
    """
    if not isinstance(key, str):
        raise TypeError(f"Claim keys must be strings, got {type(key).__name__}")
    if key in RESERVED_CLAIMS:
        raise ValueError(
            f"Claim key {key!r} is reserved; use the issued_at/expires_at fields"
        )
    if not isinstance(value, _SCALAR_TYPES):
        raise TypeError(
            f"Claim {key!r} must be str, int, float or bool, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Claim {key!r} must be a finite number, got {value!r}")


def validate_claims(claims: Mapping[str, Any]) -> Dict[str, ClaimValue]:
    """Validate every claim and return them as a fresh dict."""
    result: Dict[str, ClaimValue] = {}
    for key, value in claims.items():
        validate_claim(key, value)
        result[key] = value
    return result


def _timestamp(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedTokenError(f"Claim {name!r} must be an integer timestamp")
    return value


# --- Token claims value object -------------------------------------------


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """
    Immutable set of claims carried by a token.

    `issued_at` and `expires_at` are kept apart from the user claims and are
    only written into the payload (as `iat` / `exp`) when serialized.
    """

    claims: Mapping[str, ClaimValue]
    issued_at: Optional[int] = None
    expires_at: Optional[int] = None

    def __init__(
            self,
            claims: Mapping[str, ClaimValue] | None = None,
            issued_at: int | None = None,
            expires_at: int | None = None,
    ) -> None:
        object.__setattr__(self, "claims", MappingProxyType(validate_claims(claims or {})))
        object.__setattr__(self, "issued_at", issued_at)
        object.__setattr__(self, "expires_at", expires_at)

    def get(self, key: str, default: ClaimValue | None = None) -> ClaimValue | None:
        return self.claims.get(key, default)

    def is_expired(self, now: int) -> bool:
        return self.expires_at is not None and self.expires_at < now

    def to_payload(self) -> Dict[str, Any]:
        """User claims followed by `iat` and `exp` when they are set."""
        payload: Dict[str, Any] = dict(self.claims)
        if self.issued_at is not None:
            payload[ReservedClaim.ISSUED_AT.value] = self.issued_at
        if self.expires_at is not None:
            payload[ReservedClaim.EXPIRES_AT.value] = self.expires_at
        return payload

    @classmethod
    def trusted(
            cls,
            claims: Mapping[str, Any],
            issued_at: int | None = None,
            expires_at: int | None = None,
    ) -> TokenClaims:
        """
        Build claims without checking the values.

        For claims read back from a verified token, which may carry any JSON
        value (null, lists, objects) and must be kept as issued.
        """
        instance = cls.__new__(cls)
        object.__setattr__(instance, "claims", MappingProxyType(dict(claims)))
        object.__setattr__(instance, "issued_at", issued_at)
        object.__setattr__(instance, "expires_at", expires_at)
        return instance

    @classmethod
    def from_payload(cls, payload: Any) -> TokenClaims:
        """
        Build claims from a decoded token payload.

        Claim values are kept as decoded; only `iat` and `exp` are checked.

        Raises:
            MalformedTokenError if the payload is not an object or the
            reserved claims are not integers.
        """
        if not isinstance(payload, Mapping):
            raise MalformedTokenError("Token payload must be a JSON object")

        claims = dict(payload)
        issued_at = claims.pop(ReservedClaim.ISSUED_AT.value, None)
        expires_at = claims.pop(ReservedClaim.EXPIRES_AT.value, None)

        return cls.trusted(
            claims,
            issued_at=_timestamp("iat", issued_at) if issued_at is not None else None,
            expires_at=_timestamp("exp", expires_at) if expires_at is not None else None,
        )
