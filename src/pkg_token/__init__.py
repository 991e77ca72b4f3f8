"""
pkg_token

Compact HMAC-signed tokens (JWT-style) carrying claims, an issued-at time
and an optional expiry. Framework-agnostic; transport and authorization
are left to the host application.
"""

__version__ = "0.1.0"

from .domain.constants import ReservedClaim
from .domain.exceptions import (
    ConfigurationError,
    AuthenticationError,
    InvalidTokenError,
    MalformedTokenError,
    InvalidSignatureError,
    TokenExpiredError,
)
from .domain.value_objects import TokenClaims, ClaimValue, Secret
from .domain.ports import Clock, TokenSigner, TokenDecoder

from .application.use_cases.encode import EncodeTokenUseCase
from .application.use_cases.verify import VerifyTokenUseCase

from .adapters.clock import SystemClock, FixedClock
from .adapters.hex_hmac.signer import HexHMACSHA256Signer
from .adapters.hex_hmac.decoder import HexTokenDecoder
from .adapters.pyjwt.standard_codec import StandardJWTCodec

from .codec import TokenCodec
from .settings import TokenSettings
from .env import settings_from_env
from .factory import TokenService, create_token_service, create_token_service_from_env

__all__ = [
    "__version__",
    # domain core
    "ReservedClaim",
    "TokenClaims",
    "ClaimValue",
    "Secret",
    "Clock",
    "TokenSigner",
    "TokenDecoder",
    # exceptions
    "ConfigurationError",
    "AuthenticationError",
    "InvalidTokenError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "TokenExpiredError",
    # use cases
    "EncodeTokenUseCase",
    "VerifyTokenUseCase",
    # adapters
    "SystemClock",
    "FixedClock",
    "HexHMACSHA256Signer",
    "HexTokenDecoder",
    "StandardJWTCodec",
    # facades
    "TokenCodec",
    "TokenService",
    "TokenSettings",
    "settings_from_env",
    "create_token_service",
    "create_token_service_from_env",
]
