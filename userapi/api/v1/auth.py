import logging

from fastapi import APIRouter, Depends, Header

from userapi.deps import get_token_service
from userapi.errors import Forbidden, TokenMalformed, Unauthorized
from userapi.schemas.auth import TokenClaims, TokenOut
from userapi.services.tokens import ADMIN_ROLE, TokenService

logger = logging.getLogger(__name__)

router = APIRouter()


def check_authorization(header: str | None, tokens: TokenService) -> TokenClaims:
    """Admit an admin bearer token or raise Unauthorized/Forbidden.

    The scheme in front of the token is not inspected. An expired token is
    answered with 403 rather than 401.
    """
    if not header:
        raise Unauthorized("Authorization token is required.")

    parts = header.split()
    token = parts[1] if len(parts) > 1 else ""

    try:
        claims = tokens.verify(token)
    except TokenMalformed as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise Unauthorized("Authorization token is invalid.") from exc

    if claims.role != ADMIN_ROLE:
        raise Forbidden("Role must be admin to perform this action.")
    if claims.expires_at < tokens.now_ms():
        raise Forbidden("Authorization token has expired.")
    return claims


def require_admin_token(
    authorization: str | None = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    return check_authorization(authorization, tokens)


@router.post(
    "/login",
    response_model=TokenOut,
    summary="Generate a JWT token",
    responses={500: {"description": "Server-side error."}},
)
def login(tokens: TokenService = Depends(get_token_service)):
    """Generates a basic JWT token with role set to admin and expiry set to 5 minutes.

    The request body is ignored.
    """
    return TokenOut(token=tokens.issue(ADMIN_ROLE))
