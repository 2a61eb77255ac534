"""
Database connection management.

The engine and session factory are created per application by
create_app() (see app_factory.py) rather than at import time, so tests and
alternate deployments can hand in their own engine.

    engine = create_db_engine("sqlite:///./menu.db")
    app = create_app(engine=engine)

Route handlers receive a session through the get_db() dependency, which reads
the session factory stored on app.state.

Environment variables:
    - DATABASE_URL: SQLAlchemy connection URL (see config.py)
"""

import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from .models import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite connections are shared across the threads of the ASGI server's
    threadpool, so the same-thread check is disabled for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        echo=False,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def init_db(engine: Engine) -> None:
    """Create the menu tables if they do not exist yet."""
    Base.metadata.create_all(bind=engine)
    logger.debug("Database tables ensured on %s", engine.url.render_as_string(hide_password=True))


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a SQLAlchemy Session.

    Usage:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            ...
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
