import base64
import hashlib
import hmac
import json

NOW = 1_700_000_000
SECRET = "s3cr3t"


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_json(value) -> str:
    return b64url(json.dumps(value, separators=(",", ":")).encode("utf-8"))


def b64url_decode_json(segment: str):
    padded = segment + "=" * (-len(segment) % 4)
    return json.loads(base64.urlsafe_b64decode(padded))


def signed(header64: str, payload64: str, secret: str = SECRET) -> str:
    """Assemble a hex-signed token from raw segments."""
    message = f"{header64}.{payload64}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()
    return f"{header64}.{payload64}.{signature}"
