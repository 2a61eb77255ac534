"""
Logging configuration for the menu API.

Every record written to the console carries the ID of the HTTP request it was
logged under (set by RequestIDMiddleware, "-" outside a request), so the log
lines of one request can be grepped together:

    2026-10-18 12:00:00 - menu_api.routes.menu_items - ERROR - [3f2a...] PUT /menu-items/4 failed

Usage:
    from menu_api.logging_config import setup_logging
    setup_logging()  # Call once at application startup

Environment variables:
    LOG_LEVEL: Set to DEBUG, INFO, WARNING, ERROR, or CRITICAL (default: INFO)
"""
import logging
import os
import sys
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Set per request by RequestIDMiddleware
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIDFilter(logging.Filter):
    """Stamp the current request ID on each record as record.request_id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def create_console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logging(level: str = None) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If not provided, reads from LOG_LEVEL env var, defaults to INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    level = level.upper()
    if level not in VALID_LEVELS:
        level = "INFO"

    numeric_level = getattr(logging, level)

    # No-op when the root logger already has handlers
    logging.basicConfig(level=numeric_level, handlers=[create_console_handler()])

    logging.getLogger("menu_api").setLevel(numeric_level)

    # SQL echo and per-request access lines only in DEBUG; the request ID
    # middleware already logs each request at that level
    quiet_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in ("sqlalchemy.engine", "uvicorn.access"):
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger(__name__).debug("Logging configured at %s level", level)
