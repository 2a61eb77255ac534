"""
Routes Package for the Menu API
===============================

This package contains the API route definitions. Each module defines a
FastAPI APIRouter with related endpoints grouped together.

- menu_items.py: Menu item CRUD and search endpoints

Router Registration:
--------------------
Routers are registered by create_app() (app_factory.py) under two prefixes:
1. /* - Documented paths (e.g. /menu-items)
2. /api/* - Same endpoints at their historical location, hidden from the
   OpenAPI document

Each router is defined with a prefix and tags for OpenAPI documentation:

    menu_items_router = APIRouter(prefix="/menu-items", tags=["Menu Items"])

Route Dependencies:
-------------------
- get_db: Database session for queries (one per request)
- valid_item_id: Parses and validates the {item_id} path segment

Error Handling:
---------------
Routes raise HTTPException for error conditions, rendered as the error
envelope by error_handlers.py:
- 400: Bad request (validation errors)
- 404: Not found (unknown ID)
- 500: Database errors
"""

from .menu_items import menu_items_router

__all__ = [
    "menu_items_router",
]
