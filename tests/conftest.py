import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-with-enough-bytes-for-hs256"

import pytest
from fastapi.testclient import TestClient

from userapi.config import Settings
from userapi.database import build_engine, build_session_factory, create_schema
from userapi.main import create_app
from userapi.repositories.users import UserRepository
from userapi.services.tokens import TokenService

TEST_SECRET = "test-secret-with-enough-bytes-for-hs256"


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", JWT_SECRET=TEST_SECRET, _env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers(client):
    token = client.post("/api/v1/login").json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db_session(settings):
    engine = build_engine(settings)
    create_schema(engine)
    session = build_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def repo(db_session):
    return UserRepository(db_session)


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tokens(clock):
    return TokenService(TEST_SECRET, clock=clock)
