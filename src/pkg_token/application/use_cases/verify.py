from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass, field

from ...adapters.clock import SystemClock
from ...adapters.hex_hmac.signer import HexHMACSHA256Signer
from ...adapters.segments import decode_segment
from ...domain.constants import SEGMENT_SEPARATOR
from ...domain.exceptions import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)
from ...domain.ports import Clock, TokenSigner
from ...domain.value_objects import Secret, TokenClaims
from .encode import secret_bytes, signing_input

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VerifyTokenUseCase:
    """
    Application use case:
    - Split a token into header, payload and signature
    - Check the signature, then decode the payload into TokenClaims
    - Reject expired tokens using the injected Clock

    Nothing is mutated; the decoded claims are returned (or attached to
    TokenExpiredError when the token is only stale).
    """

    signer: TokenSigner = field(default_factory=HexHMACSHA256Signer)
    clock: Clock = field(default_factory=SystemClock)

    def execute(self, secret: Secret | None, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            ConfigurationError   if no secret is given
            MalformedTokenError  if the token cannot be parsed
            InvalidSignatureError
            TokenExpiredError
        """
        key = secret_bytes(secret)

        header64, payload64, signature = self._split(token)

        expected = self.signer.sign(key, signing_input(header64, payload64))
        if not hmac.compare_digest(signature.encode("ascii"), expected.encode("ascii")):
            logger.debug("Token rejected: signature mismatch")
            raise InvalidSignatureError("Token signature does not match")

        claims = TokenClaims.from_payload(decode_segment(payload64))

        if claims.is_expired(self.clock.now()):
            logger.debug("Token rejected: expired at %s", claims.expires_at)
            raise TokenExpiredError("Token has expired", claims)

        return claims

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _split(token: str) -> tuple[str, str, str]:
        if not isinstance(token, str) or not token.isascii():
            logger.debug("Token rejected: not an ASCII string")
            raise MalformedTokenError("Token must be an ASCII string")

        parts = token.split(SEGMENT_SEPARATOR)
        if len(parts) != 3:
            logger.debug("Token rejected: %d segments", len(parts))
            raise MalformedTokenError(
                f"Token must have 3 segments, got {len(parts)}"
            )
        return parts[0], parts[1], parts[2]
