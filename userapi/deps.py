from fastapi import Depends, Request
from sqlalchemy.orm import Session

from userapi.database import get_db
from userapi.repositories.users import UserRepository
from userapi.services.tokens import TokenService


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_repository(
    request: Request, db: Session = Depends(get_db)
) -> UserRepository:
    settings = request.app.state.settings
    bounds = None
    if settings.ENFORCE_PAGE_BOUNDS:
        bounds = (settings.PAGE_LIMIT_MIN, settings.PAGE_LIMIT_MAX)
    return UserRepository(
        db, default_limit=settings.DEFAULT_PAGE_LIMIT, limit_bounds=bounds
    )
