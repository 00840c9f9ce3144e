from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    DATABASE_URL: str = "sqlite:///./users.db"
    AUTO_CREATE_SCHEMA: bool = True

    # Bearer tokens
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_TTL_SECONDS: int = 300

    # Listing
    DEFAULT_PAGE_LIMIT: int = 10
    ENFORCE_PAGE_BOUNDS: bool = False
    PAGE_LIMIT_MIN: int = 5
    PAGE_LIMIT_MAX: int = 100

    APP_TITLE: str = "User API"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
