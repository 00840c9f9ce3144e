from pydantic import BaseModel


class TokenClaims(BaseModel):
    role: str | None = None
    expires_at: int
    iat: int | None = None


class TokenOut(BaseModel):
    token: str
