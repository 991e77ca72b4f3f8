"""
Base64url + JSON encoding of the header and payload segments.
"""

import json
from typing import Any

from jwt.utils import base64url_decode, base64url_encode

from ..domain.exceptions import MalformedTokenError


def encode_segment(value: Any) -> str:
    """Compact JSON, then unpadded base64url."""
    raw = json.dumps(value, separators=(",", ":"), allow_nan=False).encode("utf-8")
    return base64url_encode(raw).decode("ascii")


def decode_segment(segment: str) -> Any:
    """
    Reverse of `encode_segment`.

    Raises:
        MalformedTokenError if the segment is not valid base64url or does
        not contain JSON.
    """
    try:
        raw = base64url_decode(segment)
        return json.loads(raw)
    except ValueError as exc:
        # binascii.Error, UnicodeDecodeError and JSONDecodeError all land here
        raise MalformedTokenError(f"Invalid token segment: {exc}") from exc
