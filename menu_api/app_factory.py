"""
Application factory for the menu API.

create_app() builds a FastAPI application bound to one database engine. The
engine is either handed in (tests, scripts) or created from a URL, so nothing
database-related happens at import time.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from . import config
from .db import create_db_engine, create_session_factory, init_db
from .error_handlers import register_exception_handlers
from .middleware import RequestIDMiddleware
from .routes import menu_items_router

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Menu Items", "description": "Gestion des plats du menu"},
    {"name": "Health", "description": "Health check endpoints"},
]


def create_app(
    database_url: Optional[str] = None,
    engine: Optional[Engine] = None,
) -> FastAPI:
    """
    Create a FastAPI application.

    Args:
        database_url: SQLAlchemy URL used when no engine is given.
                      Defaults to config.DATABASE_URL.
        engine: Pre-built engine to use instead of creating one.

    Returns:
        Configured FastAPI application
    """
    if engine is None:
        engine = create_db_engine(database_url or config.DATABASE_URL)

    init_db(engine)

    app = FastAPI(
        title=config.API_TITLE,
        description=config.API_DESCRIPTION,
        version=config.API_VERSION,
        openapi_url=config.OPENAPI_URL,
        docs_url=config.DOCS_URL,
        redoc_url=None,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(menu_items_router)

    # Also mount under /api, where the endpoints historically lived
    app.include_router(menu_items_router, prefix="/api", include_in_schema=False)

    @app.get("/health", tags=["Health"])
    def health() -> Dict[str, str]:
        """Health check endpoint. Returns ok if the service is running."""
        return {"status": "ok"}

    logger.info(
        "Application created (database=%s, openapi=%s)",
        engine.url.render_as_string(hide_password=True),
        config.OPENAPI_URL,
    )

    return app
