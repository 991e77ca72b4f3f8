from __future__ import annotations

from typing import Protocol

from .value_objects import TokenClaims


class Clock(Protocol):
    """
    Port for reading the current time.

    Injected wherever expiry is computed or checked so verification stays
    deterministic under test.
    """

    def now(self) -> int:
        """Current Unix time in whole seconds."""
        ...


class TokenSigner(Protocol):
    """
    Port for producing the signature segment of a token.
    """

    def sign(self, secret: bytes, message: bytes) -> str:
        ...


class TokenDecoder(Protocol):
    """
    Port for decoding a token into claims.

    Implementations live in the adapters layer (hex HMAC tokens, standard
    PyJWT tokens).
    """

    def decode(self, token: str) -> TokenClaims:
        """
        Decode and verify the given token.

        Should:
          - verify signature
          - check expiry
        Raises:
          - TokenExpiredError
          - InvalidTokenError
        """
        ...
