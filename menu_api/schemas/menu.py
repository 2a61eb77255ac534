"""
Menu Item Schemas
=================

This module defines Pydantic models for menu item CRUD operations. A menu
item is one dish of the restaurant menu; it only carries a unique name and
its timestamps.

Endpoint Coverage:
------------------
- GET /menu-items: List all menu items
- POST /menu-items: Create a new menu item
- GET /menu-items/search: Search menu items by name
- GET /menu-items/{id}: Get a specific menu item
- PUT /menu-items/{id}: Update a menu item
- DELETE /menu-items/{id}: Delete a menu item

Field Naming:
-------------
Responses use camelCase keys (createdAt, updatedAt) while the ORM columns are
snake_case, and timestamps are always UTC (serialized with a "Z" suffix).
Both spellings are accepted on validation so MenuItemOut can be
built from a MenuItem row or from an already serialized payload.

Usage:
------
    item = db.query(MenuItem).first()
    out = MenuItemOut.model_validate(item)
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class MenuItemOut(BaseModel):
    """
    Response model for menu item data.

    Attributes:
        id: Database primary key
        name: Display name (e.g., "Pizza")
        created_at: Creation timestamp, serialized as createdAt
        updated_at: Last update timestamp, serialized as updatedAt
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(examples=[1])
    name: str = Field(examples=["Pizza"])
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite returns CURRENT_TIMESTAMP values (UTC) without an offset
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class MenuItemCreate(BaseModel):
    """
    Request model for creating a new menu item.

    name is optional at the schema level so that a missing name is reported
    by the route with its own message rather than as a malformed body.

    Example:
        {"name": "Pizza"}
    """
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, examples=["Pizza"])


class MenuItemUpdate(BaseModel):
    """
    Request model for updating a menu item.

    Only provided fields are updated. Unknown fields are rejected, and a
    provided name must be a non-blank string.

    Example:
        {"name": "Pizza Margherita"}
    """
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, examples=["Pizza Margherita"])

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError("name must be a non-empty string")
        return value
