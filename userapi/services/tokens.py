"""Issue and verify the signed bearer tokens guarding mutating endpoints."""
import time
from typing import Callable

import jwt
from pydantic import ValidationError

from userapi.config import Settings
from userapi.errors import TokenMalformed
from userapi.schemas.auth import TokenClaims

ADMIN_ROLE = "admin"


class TokenService:
    """Symmetric JWT issuer/verifier.

    Expiry lives in the application-level ``expires_at`` claim (epoch
    milliseconds); no registered ``exp`` claim is written, so callers compare
    ``expires_at`` themselves after ``verify``.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl_seconds: int = 300,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TokenService":
        return cls(
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            ttl_seconds=settings.TOKEN_TTL_SECONDS,
            **kwargs,
        )

    def now_ms(self) -> int:
        return int(self.clock() * 1000)

    def issue(self, role: str = ADMIN_ROLE) -> str:
        issued = self.clock()
        payload = {
            "role": role,
            "expires_at": int(issued * 1000) + self.ttl_seconds * 1000,
            "iat": int(issued),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Check signature and shape, returning the embedded claims."""
        try:
            decoded = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_iat": False},
            )
        except jwt.InvalidTokenError as exc:
            raise TokenMalformed(str(exc)) from exc
        try:
            return TokenClaims.model_validate(decoded)
        except ValidationError as exc:
            raise TokenMalformed("token claims are malformed") from exc
