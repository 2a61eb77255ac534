"""
Schemas Package for the Menu API
================================

Pydantic models used for request validation, response serialization and the
generated OpenAPI document.

Schema Organization:
--------------------
- **menu.py**: Menu item CRUD schemas
- **responses.py**: Success and error envelopes shared by every endpoint

Naming Conventions:
-------------------
- *Out: Response models (e.g., MenuItemOut) - what API returns
- *Create: Request models for POST (e.g., MenuItemCreate)
- *Update: Request models for PUT (e.g., MenuItemUpdate)
- *Response: Envelope structures (e.g., ApiResponse, ErrorResponse)

Usage:
------
    from menu_api.schemas import MenuItemOut, ApiResponse
"""

# Menu schemas
from .menu import (
    MenuItemOut,
    MenuItemCreate,
    MenuItemUpdate,
)

# Envelope schemas
from .responses import (
    ApiResponse,
    ErrorResponse,
)

__all__ = [
    "MenuItemOut",
    "MenuItemCreate",
    "MenuItemUpdate",
    "ApiResponse",
    "ErrorResponse",
]
