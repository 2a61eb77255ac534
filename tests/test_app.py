"""
Tests for application wiring: factory, database injection, middleware and
configuration.
"""
import importlib

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from menu_api import config
from menu_api.app_factory import create_app
from menu_api.db import create_db_engine, get_db
from menu_api.models import MenuItem


def test_health_endpoint(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_request_id_in_response_header(client):
    """Test that X-Request-ID header is returned in responses."""
    resp = client.get("/menu-items")
    assert resp.status_code == 200
    assert "X-Request-ID" in resp.headers
    # Request ID should be a UUID-like string (36 chars with hyphens)
    request_id = resp.headers["X-Request-ID"]
    assert len(request_id) == 36
    assert request_id.count("-") == 4


def test_request_id_can_be_provided_by_client(client):
    """Test that client-provided X-Request-ID is used."""
    custom_id = "test-request-id-12345"
    resp = client.get("/menu-items", headers={"X-Request-ID": custom_id})
    assert resp.headers["X-Request-ID"] == custom_id


def test_request_id_on_error_responses(client):
    resp = client.get("/menu-items/0")
    assert resp.status_code == 400
    assert "X-Request-ID" in resp.headers


def test_create_app_creates_tables(engine):
    create_app(engine=engine)
    assert "menu_items" in inspect(engine).get_table_names()


def test_create_app_from_database_url(tmp_path):
    """Apps built from a URL persist to their own database."""
    url = f"sqlite:///{tmp_path / 'menu.db'}"

    app = create_app(database_url=url)
    with TestClient(app) as test_client:
        assert test_client.post("/menu-items", json={"name": "Pizza"}).status_code == 201

    other = create_app(database_url=f"sqlite:///{tmp_path / 'other.db'}")
    with TestClient(other) as test_client:
        assert test_client.get("/menu-items").json()["data"] == []

    app.state.engine.dispose()
    other.state.engine.dispose()


def test_get_db_yields_session_from_app_state(app):
    class _Request:
        pass

    request = _Request()
    request.app = app

    gen = get_db(request)
    session = next(gen)
    assert session.bind is app.state.engine
    assert session.query(MenuItem).count() == 0
    with pytest.raises(StopIteration):
        next(gen)


def test_create_db_engine_sqlite_allows_cross_thread_use(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'menu.db'}")
    try:
        with engine.connect() as conn:
            assert conn.exec_driver_sql("select 1").scalar() == 1
    finally:
        engine.dispose()


def test_cors_allows_configured_origin(client):
    resp = client.get("/menu-items", headers={"Origin": "http://localhost:3000"})
    assert resp.status_code == 200
    assert "access-control-allow-origin" in resp.headers


class TestConfig:
    """Test environment parsing in config.py."""

    @pytest.fixture(autouse=True)
    def _reload_config(self):
        yield
        importlib.reload(config)

    def test_defaults(self, monkeypatch):
        for var in ("DATABASE_URL", "CORS_ORIGINS", "OPENAPI_URL", "DOCS_URL", "PORT"):
            monkeypatch.delenv(var, raising=False)
        importlib.reload(config)

        assert config.DATABASE_URL == "sqlite:///./menu.db"
        assert config.CORS_ORIGINS == ["*"]
        assert config.OPENAPI_URL == "/api/swagger"
        assert config.DOCS_URL == "/api-docs"
        assert config.PORT == 8000

    def test_cors_origins_parsed_from_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://menu.example.com, https://admin.example.com,")
        importlib.reload(config)

        assert config.CORS_ORIGINS == ["https://menu.example.com", "https://admin.example.com"]

    def test_openapi_url_is_configurable(self, monkeypatch, engine):
        monkeypatch.setenv("OPENAPI_URL", "/openapi.json")
        importlib.reload(config)

        with TestClient(create_app(engine=engine)) as test_client:
            assert test_client.get("/openapi.json").status_code == 200
