from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .adapters.clock import SystemClock
from .application.use_cases.encode import EncodeTokenUseCase
from .application.use_cases.verify import VerifyTokenUseCase
from .codec import TokenCodec
from .domain.ports import Clock
from .domain.value_objects import ClaimValue, Secret, TokenClaims
from .env import settings_from_env
from .settings import TokenSettings


@dataclass(slots=True)
class TokenService:
    """
    Stateless token facade bound to one secret.

    Safe to share between requests, unlike TokenCodec.
    """

    encode_use_case: EncodeTokenUseCase
    verify_use_case: VerifyTokenUseCase
    clock: Clock
    secret: Secret
    default_ttl_seconds: Optional[int] = None

    # --- Core operations --------------------------------------------------

    def issue(
            self,
            claims: Mapping[str, ClaimValue],
            *,
            ttl_seconds: Optional[int] = None,
    ) -> str:
        """Claims -> signed token stamped with `iat` (and `exp` if a TTL applies)."""
        now = self.clock.now()
        ttl = ttl_seconds if ttl_seconds is not None else self.default_ttl_seconds

        token_claims = TokenClaims(
            claims=claims,
            issued_at=now,
            expires_at=now + ttl if ttl else None,
        )
        return self.encode_use_case.execute(self.secret, token_claims)

    def verify(self, token: str) -> TokenClaims:
        """Token -> TokenClaims (or raise auth exceptions)."""
        return self.verify_use_case.execute(self.secret, token)

    def new_codec(self) -> TokenCodec:
        """A fresh mutable codec sharing this service's secret, clock and signer."""
        return TokenCodec(
            self.secret,
            clock=self.clock,
            signer=self.encode_use_case.signer,
        )


def create_token_service(
        settings: TokenSettings,
        *,
        clock: Clock | None = None,
) -> TokenService:
    """
    High-level factory: TokenSettings -> TokenService.

    - wires EncodeTokenUseCase + VerifyTokenUseCase around one clock
    - returns a TokenService facade.
    """
    clock = clock or SystemClock()

    return TokenService(
        encode_use_case=EncodeTokenUseCase(),
        verify_use_case=VerifyTokenUseCase(clock=clock),
        clock=clock,
        secret=settings.secret,
        default_ttl_seconds=settings.default_ttl_seconds,
    )


def create_token_service_from_env(*, clock: Clock | None = None) -> TokenService:
    """Convenience wrapper using env-configured settings."""
    return create_token_service(settings_from_env(), clock=clock)
