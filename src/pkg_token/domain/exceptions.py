from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import TokenClaims


class ConfigurationError(RuntimeError):
    """Raised when the codec is used without the settings it needs (e.g. no secret)."""
    pass


class AuthenticationError(Exception):
    """Raised when a token is rejected."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when token is malformed or invalid."""
    pass


class MalformedTokenError(InvalidTokenError):
    """Raised when token cannot be parsed into header, payload and signature."""
    pass


class InvalidSignatureError(InvalidTokenError):
    """Raised when the token signature does not match its contents."""
    pass


class TokenExpiredError(AuthenticationError):
    """
    Raised when a correctly signed token has expired.

    The decoded claims are kept on `claims` so callers can still inspect them.
    """

    def __init__(self, message: str, claims: TokenClaims) -> None:
        super().__init__(message)
        self.claims = claims
