from __future__ import annotations

from dataclasses import dataclass, field

from ...adapters.hex_hmac.signer import HexHMACSHA256Signer
from ...adapters.segments import encode_segment
from ...domain.constants import HEADER, SEGMENT_SEPARATOR
from ...domain.exceptions import ConfigurationError
from ...domain.ports import TokenSigner
from ...domain.value_objects import Secret, TokenClaims


def secret_bytes(secret: Secret | None) -> bytes:
    """
    Normalize a signing secret to bytes.

    Raises:
        ConfigurationError if no secret is configured.
        TypeError if the secret is neither str nor bytes.
    """
    if secret is None:
        raise ConfigurationError("Token secret is not configured")
    if isinstance(secret, str):
        return secret.encode("utf-8")
    if isinstance(secret, (bytes, bytearray)):
        return bytes(secret)
    raise TypeError(f"Token secret must be str or bytes, got {type(secret).__name__}")


def signing_input(header64: str, payload64: str) -> bytes:
    return f"{header64}{SEGMENT_SEPARATOR}{payload64}".encode("ascii")


@dataclass(slots=True)
class EncodeTokenUseCase:
    """
    Application use case:
    - Serialize header and claims into base64url segments
    - Sign them with the configured TokenSigner

    Stateless: the same secret and claims always produce the same token.
    """

    signer: TokenSigner = field(default_factory=HexHMACSHA256Signer)

    def execute(self, secret: Secret | None, claims: TokenClaims) -> str:
        """
        Raises:
            ConfigurationError if no secret is given.
        """
        key = secret_bytes(secret)

        header64 = encode_segment(HEADER)
        payload64 = encode_segment(claims.to_payload())
        signature = self.signer.sign(key, signing_input(header64, payload64))

        return SEGMENT_SEPARATOR.join((header64, payload64, signature))
