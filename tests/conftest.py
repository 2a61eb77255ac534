import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from menu_api.app_factory import create_app


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by the app and the test.

    Uses StaticPool so all connections share the same in-memory database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    """FastAPI application bound to the in-memory engine (tables created)."""
    return create_app(engine=engine)


@pytest.fixture
def client(app):
    """Shared FastAPI TestClient on an empty menu."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, engine):
    """Direct ORM session on the same database as the client."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def create_item(client):
    """Create a menu item through the API and return its data."""
    def _create(name: str) -> dict:
        resp = client.post("/menu-items", json={"name": name})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]
    return _create
