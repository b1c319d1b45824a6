import pytest
import fakeredis
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from calchub.main import app
from calchub import db as db_module
from calchub import deps
from calchub.db import Base
from calchub.infra import redis_client
from calchub.models import StateEntry  # noqa: F401
from calchub.routers.units import limiter
from calchub.settings import settings

# --- Test Database Setup ---

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool  # Important for in-memory to share connection across sessions
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def fake_redis_server():
    server = fakeredis.FakeServer()
    sync_redis = fakeredis.FakeRedis(server=server, decode_responses=True)

    # Force the client into the infra module
    redis_client._redis_sync = sync_redis

    yield server

    # Cleanup
    redis_client._redis_sync = None


@pytest.fixture
def mock_redis(fake_redis_server):
    return redis_client._redis_sync


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture(autouse=True)
def reset_state_backend(monkeypatch):
    """Every test starts on the redis backend with empty process memory."""
    monkeypatch.setattr(settings, "state_backend", "redis")
    deps.memory_storage.clear()
    yield
    deps.memory_storage.clear()


@pytest.fixture
def db_session():
    """Create tables before the test, drop after."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def sql_backend(db_session, monkeypatch):
    """Route API state storage through the test database."""
    monkeypatch.setattr(db_module, "_SessionLocal", TestingSessionLocal)
    monkeypatch.setattr(settings, "state_backend", "sql")
    return db_session


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


class FailingStorage:
    """Storage whose every call raises (quota exceeded, private browsing...)."""

    def get(self, key):
        raise RuntimeError("storage unavailable")

    def set(self, key, value):
        raise RuntimeError("storage unavailable")

    def delete(self, key):
        raise RuntimeError("storage unavailable")


@pytest.fixture
def failing_storage():
    return FailingStorage()
