from enum import Enum


class ReservedClaim(str, Enum):
    ISSUED_AT = "iat"
    EXPIRES_AT = "exp"


ALGORITHM = "HS256"
TOKEN_TYPE = "JWT"

HEADER = {"alg": ALGORITHM, "typ": TOKEN_TYPE}

SEGMENT_SEPARATOR = "."

RESERVED_CLAIMS = frozenset(c.value for c in ReservedClaim)
