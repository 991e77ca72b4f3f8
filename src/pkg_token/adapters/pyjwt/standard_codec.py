import logging
from typing import Any, Mapping

import jwt
from jwt.exceptions import (
    DecodeError,
    InvalidSignatureError as JWTInvalidSignatureError,
    InvalidTokenError as JWTInvalidTokenError,
)

from ...application.use_cases.encode import secret_bytes
from ...domain.constants import ALGORITHM
from ...domain.exceptions import (
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
)
from ...domain.ports import Clock, TokenDecoder
from ...domain.value_objects import Secret, TokenClaims
from ..clock import SystemClock

logger = logging.getLogger(__name__)


class StandardJWTCodec(TokenDecoder):
    """
    RFC 7519 HS256 tokens using PyJWT.

    Unlike the default format, the signature segment is the base64url
    encoded raw HMAC digest, so these tokens are readable by any JWT
    library. Meant for moving consumers off the hex-signed format one
    version at a time; the two formats are not interchangeable.

    Expiry is checked against the injected clock rather than PyJWT's own
    wall-clock check.
    """

    def __init__(
        self,
        secret: Secret | None,
        clock: Clock | None = None,
        leeway_seconds: int = 0,
    ) -> None:
        self._key = secret_bytes(secret)
        self._clock: Clock = clock or SystemClock()
        self._leeway = leeway_seconds

    def encode(self, claims: TokenClaims) -> str:
        return jwt.encode(claims.to_payload(), self._key, algorithm=ALGORITHM)

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def decode(self, token: str) -> TokenClaims:
        """
        Decode and validate a standard JWT.

        Raises:
            TokenExpiredError
            InvalidSignatureError
            MalformedTokenError
            InvalidTokenError
        """
        try:
            payload: Mapping[str, Any] = jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                options={"verify_exp": False, "verify_iat": False},
            )
        except JWTInvalidSignatureError as exc:
            logger.debug("Standard token rejected: signature mismatch")
            raise InvalidSignatureError("Token signature does not match") from exc
        except DecodeError as exc:
            raise MalformedTokenError(f"Invalid token: {exc}") from exc
        except JWTInvalidTokenError as exc:
            raise InvalidTokenError(f"Invalid token: {exc}") from exc

        claims = TokenClaims.from_payload(payload)

        if claims.expires_at is not None and claims.expires_at + self._leeway < self._clock.now():
            logger.debug("Standard token rejected: expired at %s", claims.expires_at)
            raise TokenExpiredError("Token has expired", claims)

        return claims
