from unittest.mock import MagicMock

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from langchain_openai import ChatOpenAI
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from resume_builder.app.core.auth import get_current_user, get_optional_current_user
from resume_builder.app.core.config import Settings, get_settings
from resume_builder.app.database.database import get_db
from resume_builder.app.main import create_app
from resume_builder.app.models import Base
from resume_builder.app.models.user import User


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a fake API key and small, predictable limits."""
    return Settings(
        SECRET_KEY="test-secret-key",
        GEMINI_API_KEY="test-api-key",
        MAX_PROMPT_WORDS=80,
        MAX_PROMPT_CHARS=600,
        ANONYMOUS_PROMPT_LIMIT=100,
    )


@pytest.fixture
def db_engine():
    """In-memory SQLite engine shared across connections, with foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mock_db_session():
    """Fixture to provide a mock database session."""
    return MagicMock()


def make_user(db, email: str) -> User:
    user = User(email=email, hashed_password="not-a-real-hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user_factory(db_session):
    """Create extra users in the SQLite database."""
    return lambda email: make_user(db_session, email)


@pytest.fixture
def test_user(db_session) -> User:
    return make_user(db_session, "owner@example.com")


@pytest.fixture
def other_user(db_session) -> User:
    return make_user(db_session, "other@example.com")


@pytest.fixture
def app(test_settings, db_session) -> FastAPI:
    """Fixture to create a new app for each test, bound to the SQLite session."""
    _app = create_app()
    _app.dependency_overrides[get_settings] = lambda: test_settings
    _app.dependency_overrides[get_db] = lambda: db_session
    yield _app
    _app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Fixture to create a test client for each test."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def authenticated_client(app: FastAPI, test_user: User) -> TestClient:
    """Test client whose requests are authenticated as `test_user`."""
    app.dependency_overrides[get_current_user] = lambda: test_user
    app.dependency_overrides[get_optional_current_user] = lambda: test_user
    with TestClient(app) as c:
        yield c


@pytest.fixture
def gateway_llm():
    """Build a real ChatOpenAI whose endpoint answers every call with 200 and `body`."""

    def _build(body: dict) -> ChatOpenAI:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
        return ChatOpenAI(
            model="test-model",
            api_key="test-key",
            base_url="https://llm.example.com/v1/",
            max_retries=0,
            http_async_client=httpx.AsyncClient(transport=transport),
        )

    return _build
