import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.context import build_context
from database import init_db
from main import create_app


TEST_SECRET = "test-signing-secret"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def context(settings):
    ctx = build_context(settings)
    init_db(ctx.engine)
    yield ctx
    ctx.engine.dispose()


@pytest.fixture
def db(context):
    session = context.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def login(client):
    """Registers a user over HTTP and returns bearer headers for it."""

    def _login(username: str, password: str = "s3cret") -> dict:
        res = client.post("/register", json={"username": username, "password": password})
        assert res.status_code == 201
        res = client.post("/token", data={"username": username, "password": password})
        assert res.status_code == 200
        return {"Authorization": f"Bearer {res.json()['access_token']}"}

    return _login
