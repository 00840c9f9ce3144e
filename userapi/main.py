import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from userapi.config import Settings, get_settings
from userapi.database import build_engine, build_session_factory, create_schema
from userapi.error_handlers import register_error_handlers
from userapi.services.tokens import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings.AUTO_CREATE_SCHEMA:
        create_schema(app.state.engine)
        logger.info("Schema ready")
    yield
    app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.token_service = TokenService.from_settings(settings)

    from userapi.api.v1 import api_router

    app.include_router(api_router)
    register_error_handlers(app)

    return app


app = create_app()
