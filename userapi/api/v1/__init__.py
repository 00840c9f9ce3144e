from fastapi import APIRouter

from userapi.api.v1.auth import router as auth_router
from userapi.api.v1.users import router as users_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(auth_router, tags=["Authentication"])
