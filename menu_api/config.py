"""
Configuration Module for the Menu API
=====================================

This module centralizes the configuration settings and environment variables
used throughout the Menu API. Values are read once at module load time, after
main.py has loaded any .env file with python-dotenv.

Configuration Categories:
-------------------------
- **Database**: Connection URL for the SQLAlchemy engine. Defaults to a local
  SQLite file so the service starts without any setup.

- **Logging**: LOG_LEVEL is read by setup_logging() when it is called (see
  logging_config.py), so it is not cached here.

- **CORS Settings**: Cross-Origin Resource Sharing configuration for the
  frontend consuming the API. Defaults allow all origins for development.

- **Documentation**: Title, version and URLs of the generated OpenAPI
  document and its browser viewer.

- **Server**: Bind address used by run.py.

Environment Variables:
----------------------
- DATABASE_URL: SQLAlchemy URL (default: "sqlite:///./menu.db")
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: "INFO")
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")
- API_TITLE: Title of the OpenAPI document (default: "API de gestion du menu")
- API_VERSION: Version of the OpenAPI document (default: "1.0.0")
- OPENAPI_URL: Path serving the OpenAPI JSON (default: "/api/swagger")
- DOCS_URL: Path serving the documentation viewer (default: "/api-docs")
- HOST: Bind host for run.py (default: "0.0.0.0")
- PORT: Bind port for run.py (default: 8000)

Usage:
------
    from menu_api.config import DATABASE_URL, CORS_ORIGINS
"""

import os
from typing import List


# =============================================================================
# Database Configuration
# =============================================================================

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./menu.db")


# =============================================================================
# CORS Configuration
# =============================================================================
# Format: comma-separated list of origins, e.g., "https://menu.example.com,https://admin.example.com"
# Default "*" allows all origins (suitable for development only)

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]


# =============================================================================
# API Documentation Configuration
# =============================================================================

API_TITLE: str = os.getenv("API_TITLE", "API de gestion du menu")
API_VERSION: str = os.getenv("API_VERSION", "1.0.0")
API_DESCRIPTION: str = "API de gestion des plats du menu d'un restaurant."

OPENAPI_URL: str = os.getenv("OPENAPI_URL", "/api/swagger")
DOCS_URL: str = os.getenv("DOCS_URL", "/api-docs")


# =============================================================================
# Server Configuration
# =============================================================================

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
