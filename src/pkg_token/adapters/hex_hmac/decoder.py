from dataclasses import dataclass, field

from ...application.use_cases.verify import VerifyTokenUseCase
from ...domain.ports import TokenDecoder
from ...domain.value_objects import Secret, TokenClaims


@dataclass(slots=True)
class HexTokenDecoder(TokenDecoder):
    """
    TokenDecoder for the library's own hex-signed tokens, bound to a secret.
    """
    secret: Secret
    verify_use_case: VerifyTokenUseCase = field(default_factory=VerifyTokenUseCase)

    def decode(self, token: str) -> TokenClaims:
        return self.verify_use_case.execute(self.secret, token)
