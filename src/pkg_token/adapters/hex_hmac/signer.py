import hashlib
import hmac

from ...domain.ports import TokenSigner


class HexHMACSHA256Signer(TokenSigner):
    """
    HMAC-SHA256 signer producing a lowercase hex digest.

    Tokens issued by this library carry the hex digest as their third
    segment rather than the base64url-encoded raw digest RFC 7519 uses.
    Changing this would invalidate every token already issued, so the
    standard format lives in a separate codec (see adapters.pyjwt).
    """

    def sign(self, secret: bytes, message: bytes) -> str:
        return hmac.new(secret, message, hashlib.sha256).hexdigest()
