from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from .adapters.clock import SystemClock
from .application.use_cases.encode import EncodeTokenUseCase
from .application.use_cases.verify import VerifyTokenUseCase
from .domain.exceptions import AuthenticationError, ConfigurationError, TokenExpiredError
from .domain.ports import Clock, TokenSigner
from .domain.value_objects import (
    ClaimValue,
    Secret,
    TokenClaims,
    validate_claim,
    validate_claims,
)

logger = logging.getLogger(__name__)


class TokenCodec:
    """
    Mutable token builder / checker bound to one signing secret.

    Build a token:

        codec = TokenCodec("s3cr3t")
        codec.add_claim("user", "alice")
        codec.set_expires_at(now + 3600)
        token = codec.encode()

    Check one (claims and timestamps are loaded into the instance):

        codec = TokenCodec("s3cr3t")
        if codec.verify(token):
            user = codec.get_claim("user")

    The first `encode()` result is cached: later claim changes on the same
    instance do not produce a new token. Instances are not thread-safe.
    """

    def __init__(
            self,
            secret: Secret | None,
            *,
            clock: Clock | None = None,
            signer: TokenSigner | None = None,
    ) -> None:
        self._secret = secret
        self._clock: Clock = clock or SystemClock()

        if signer is None:
            self._encode_uc = EncodeTokenUseCase()
            self._verify_uc = VerifyTokenUseCase(clock=self._clock)
        else:
            self._encode_uc = EncodeTokenUseCase(signer=signer)
            self._verify_uc = VerifyTokenUseCase(signer=signer, clock=self._clock)

        self._claims: Dict[str, ClaimValue] = {}
        self._issued_at: Optional[int] = None
        self._expires_at: Optional[int] = None
        self._token: Optional[str] = None

    # ------------------------------------------------------------------ #
    # Claims
    # ------------------------------------------------------------------ #

    def set_claims(self, claims: Mapping[str, ClaimValue]) -> None:
        self._claims = validate_claims(claims)

    def add_claim(self, key: str, value: ClaimValue) -> None:
        validate_claim(key, value)
        self._claims[key] = value

    def get_claims(self) -> Dict[str, ClaimValue]:
        """Current claims, without `iat` / `exp`."""
        return dict(self._claims)

    def get_claim(self, key: str) -> ClaimValue | None:
        return self._claims.get(key)

    # ------------------------------------------------------------------ #
    # Timestamps
    # ------------------------------------------------------------------ #

    def set_issued_at(self, timestamp: int) -> None:
        self._issued_at = timestamp

    def get_issued_at(self) -> int | None:
        return self._issued_at

    def set_expires_at(self, timestamp: int) -> None:
        """
        Set the expiration time. An expiring token must also say when it was
        issued, so `issued_at` defaults to now if it is not set yet.
        """
        self._expires_at = timestamp
        if self._issued_at is None:
            self._issued_at = self._clock.now()

    def get_expires_at(self) -> int | None:
        return self._expires_at

    # ------------------------------------------------------------------ #
    # Encode / verify
    # ------------------------------------------------------------------ #

    def to_claims(self) -> TokenClaims:
        # claims were checked by the setters or came from a verified token
        return TokenClaims.trusted(
            claims=self._claims,
            issued_at=self._issued_at,
            expires_at=self._expires_at,
        )

    def encode(self) -> str:
        """
        Return the signed token for the current claims.

        Raises:
            ConfigurationError if no secret is configured.
        """
        if self._secret is None:
            raise ConfigurationError("Token secret is not configured")
        if self._token is None:
            self._token = self._encode_uc.execute(self._secret, self.to_claims())
        return self._token

    def verify(self, token: str) -> bool:
        """
        Check a token's signature and expiry.

        On a valid signature the token's claims replace the ones held by
        this instance, even when the token turns out to be expired. As with
        `set_expires_at`, a token carrying `exp` but no `iat` gets
        `issued_at` set to now. Any malformed input simply yields False.

        Raises:
            ConfigurationError if no secret is configured.
        """
        try:
            claims = self._verify_uc.execute(self._secret, token)
        except TokenExpiredError as exc:
            self._load(exc.claims)
            return False
        except AuthenticationError as exc:
            logger.debug("Token verification failed: %s", exc)
            return False

        self._load(claims)
        return True

    def _load(self, claims: TokenClaims) -> None:
        self._claims = dict(claims.claims)
        self._issued_at = claims.issued_at
        self._expires_at = claims.expires_at
        if self._expires_at is not None and self._issued_at is None:
            self._issued_at = self._clock.now()
