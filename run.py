#!/usr/bin/env python3
"""
Startup script for the menu API.

Usage:
    # Run with settings from the environment / .env
    python run.py

    # Run with custom port
    python run.py --port 8001

    # Run against another database
    python run.py --database-url sqlite:///./data/menu.db

    # Run with reload for development
    python run.py --reload
"""

import argparse
import os

from dotenv import load_dotenv


def run(
    host: str = None,
    port: int = None,
    database_url: str = None,
    reload: bool = False,
) -> None:
    """Run the API with uvicorn."""
    load_dotenv()

    # Must be set before menu_api.config is imported
    if database_url:
        os.environ["DATABASE_URL"] = database_url

    from menu_api import config

    host = host or config.HOST
    port = port or config.PORT
    database_url = config.DATABASE_URL

    print(f"\n{'=' * 50}")
    print(f"Starting: {config.API_TITLE} v{config.API_VERSION}")
    print(f"Address:  http://{host}:{port}")
    print(f"Docs:     http://{host}:{port}{config.DOCS_URL}")
    print(f"Database: {database_url}")
    print(f"{'=' * 50}\n")

    # Ensure data directory exists
    if database_url.startswith("sqlite:///./"):
        db_path = database_url.replace("sqlite:///./", "")
        db_dir = os.path.dirname(db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    import uvicorn

    uvicorn.run(
        "menu_api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Run the menu API"
    )
    parser.add_argument(
        "--host",
        help="Host to bind to (default: $HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="Port to run on (default: $PORT or 8000)",
    )
    parser.add_argument(
        "--database-url",
        help="SQLAlchemy database URL (overrides $DATABASE_URL)",
    )
    parser.add_argument(
        "--reload",
        "-r",
        action="store_true",
        help="Enable auto-reload for development",
    )

    args = parser.parse_args()

    run(
        host=args.host,
        port=args.port,
        database_url=args.database_url,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
