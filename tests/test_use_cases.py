# tests/test_use_cases.py
import pytest

from pkg_token.adapters.hex_hmac.decoder import HexTokenDecoder
from pkg_token.adapters.hex_hmac.signer import HexHMACSHA256Signer
from pkg_token.adapters.segments import decode_segment, encode_segment
from pkg_token.application.use_cases.encode import EncodeTokenUseCase, secret_bytes
from pkg_token.application.use_cases.verify import VerifyTokenUseCase
from pkg_token.domain.exceptions import (
    ConfigurationError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)
from pkg_token.domain.value_objects import TokenClaims

from helpers import NOW, SECRET, b64url_json, signed


def test_signer_matches_known_vector():
    # RFC 4231 test case 2
    signer = HexHMACSHA256Signer()
    assert signer.sign(b"Jefe", b"what do ya want for nothing?") == (
        "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


def test_secret_bytes():
    assert secret_bytes("abc") == b"abc"
    assert secret_bytes(b"abc") == b"abc"
    assert secret_bytes("") == b""
    assert secret_bytes(bytearray(b"abc")) == b"abc"
    with pytest.raises(TypeError):
        secret_bytes(42)
    with pytest.raises(TypeError):
        secret_bytes(["s3cr3t"])
    with pytest.raises(ConfigurationError):
        secret_bytes(None)


def test_segments():
    assert encode_segment({"alg": "HS256", "typ": "JWT"}) == "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    assert decode_segment(encode_segment({"a": [1, 2]})) == {"a": [1, 2]}
    with pytest.raises(MalformedTokenError):
        decode_segment("bm90IGpzb24")
    with pytest.raises(ValueError):
        encode_segment({"ratio": float("nan")})


def test_encode_use_case_recomputes():
    claims = TokenClaims({"user": "alice"}, issued_at=NOW)
    token = EncodeTokenUseCase().execute(SECRET, claims)

    header64, payload64, _ = token.split(".")
    assert token == signed(header64, payload64)
    assert payload64 == b64url_json({"user": "alice", "iat": NOW})
    assert EncodeTokenUseCase().execute(SECRET, claims) == token


def test_encode_use_case_requires_secret():
    with pytest.raises(ConfigurationError):
        EncodeTokenUseCase().execute(None, TokenClaims())


def test_verify_use_case_returns_claims(clock):
    claims = TokenClaims({"user": "alice"}, issued_at=NOW, expires_at=NOW + 60)
    token = EncodeTokenUseCase().execute(SECRET, claims)

    assert VerifyTokenUseCase(clock=clock).execute(SECRET, token) == claims


def test_verify_use_case_errors(clock):
    uc = VerifyTokenUseCase(clock=clock)
    token = EncodeTokenUseCase().execute(SECRET, TokenClaims({"user": "alice"}))

    with pytest.raises(ConfigurationError):
        uc.execute(None, token)
    with pytest.raises(InvalidSignatureError):
        uc.execute("other", token)
    with pytest.raises(MalformedTokenError):
        uc.execute(SECRET, "a.b")
    with pytest.raises(MalformedTokenError):
        uc.execute(SECRET, signed("e30", b64url_json([1])))


def test_verify_use_case_expired_carries_claims(clock):
    claims = TokenClaims({"user": "alice"}, issued_at=NOW - 60, expires_at=NOW - 1)
    token = EncodeTokenUseCase().execute(SECRET, claims)

    with pytest.raises(TokenExpiredError) as excinfo:
        VerifyTokenUseCase(clock=clock).execute(SECRET, token)
    assert excinfo.value.claims == claims


def test_hex_token_decoder(clock):
    token = EncodeTokenUseCase().execute(SECRET, TokenClaims({"user": "alice"}))
    decoder = HexTokenDecoder(secret=SECRET, verify_use_case=VerifyTokenUseCase(clock=clock))

    assert decoder.decode(token).get("user") == "alice"
    with pytest.raises(InvalidSignatureError):
        HexTokenDecoder(secret="other").decode(token)
