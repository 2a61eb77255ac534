"""
Menu Item Routes
================

This module contains the endpoints managing the dishes of the menu. Every
endpoint validates its input, performs one read or write through the
SQLAlchemy session and answers with the JSON envelope described in
schemas/responses.py.

Endpoints:
----------
- GET /menu-items: List all menu items, newest first
- POST /menu-items: Create a new menu item
- GET /menu-items/search?name=...: Case-insensitive search by name
- GET /menu-items/{id}: Get a specific menu item
- PUT /menu-items/{id}: Update a menu item
- DELETE /menu-items/{id}: Delete a menu item

Error Handling:
---------------
Routes raise HTTPException; error_handlers.py renders it as
{"success": false, "error": ...}:
- 400: Missing or duplicate name, invalid id, malformed body, blank search term
- 404: Valid id with no matching menu item
- 500: Any database error. The session is rolled back and the error logged;
  clients only get a generic message.

Usage:
------
    POST /menu-items
    {"name": "Pizza"}

    -> 201
    {
        "success": true,
        "data": {"id": 1, "name": "Pizza", "createdAt": "...", "updatedAt": "..."},
        "message": "Plat ajouté avec succès"
    }
"""

import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import MenuItem
from ..schemas.menu import MenuItemOut, MenuItemCreate, MenuItemUpdate
from ..schemas.responses import ApiResponse, ErrorResponse


logger = logging.getLogger(__name__)

# Router definition
menu_items_router = APIRouter(prefix="/menu-items", tags=["Menu Items"])


# =============================================================================
# Messages
# =============================================================================

NAME_REQUIRED = "Le nom du plat est obligatoire"
DUPLICATE_NAME = "Un plat avec ce nom existe déjà"
INVALID_ID = "ID du plat invalide"
NOT_FOUND = "Plat non trouvé"
SEARCH_TERM_REQUIRED = "Paramètre name manquant ou vide"

CREATED = "Plat ajouté avec succès"
RETRIEVED = "Plat récupéré avec succès"
UPDATED = "Plat mis à jour avec succès"
DELETED = "Plat supprimé avec succès"

LIST_FAILED = "Erreur lors de la récupération des plats"
CREATE_FAILED = "Erreur lors de l'ajout du plat"
SEARCH_FAILED = "Erreur lors de la recherche des plats"
GET_FAILED = "Erreur lors de la récupération du plat"
UPDATE_FAILED = "Erreur lors de la mise à jour du plat"
DELETE_FAILED = "Erreur lors de la suppression du plat"


def list_message(count: int) -> str:
    return f"{count} plat(s) trouvé(s)"


# Upper bound of the BIGINT / SQLite rowid primary key
MAX_ITEM_ID = 2**63 - 1

# ASCII digits only
_ITEM_ID_PATTERN = re.compile(r"\s*([0-9]+)\s*")


# =============================================================================
# Helper Functions
# =============================================================================

def serialize_menu_item(item: MenuItem) -> MenuItemOut:
    """Convert MenuItem model to response schema."""
    return MenuItemOut.model_validate(item)


def valid_item_id(
    item_id: str = Path(description="ID du plat (entier strictement positif)", examples=["1"]),
) -> int:
    """
    Parse the {item_id} path segment.

    Accepts a positive decimal integer that fits the primary key column.
    Anything else ("abc", "0", "-1", "1.5") is rejected with a 400.
    """
    match = _ITEM_ID_PATTERN.fullmatch(item_id)
    if not match:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)
    value = int(match.group(1))
    if value <= 0 or value > MAX_ITEM_ID:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)
    return value


def persistence_failure(db: Session, request: Request, detail: str) -> HTTPException:
    """
    Roll back the session and build the 500 error for a failed database call.

    Must be called from inside the except block so the traceback is logged.
    """
    db.rollback()
    logger.exception("%s %s failed", request.method, request.url.path)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _error(description: str) -> dict:
    return {"model": ErrorResponse, "description": description}


# =============================================================================
# Menu Item Endpoints
# =============================================================================

@menu_items_router.get(
    "",
    response_model=ApiResponse[List[MenuItemOut]],
    response_model_exclude_unset=True,
    summary="Récupérer tous les plats",
    description="Récupère une liste de tous les plats disponibles dans le menu, du plus récent au plus ancien.",
    responses={500: _error(LIST_FAILED)},
)
def list_menu_items(
    request: Request,
    db: Session = Depends(get_db),
) -> ApiResponse[List[MenuItemOut]]:
    """List all menu items, most recently created first."""
    try:
        items = (
            db.query(MenuItem)
            .order_by(MenuItem.created_at.desc(), MenuItem.id.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise persistence_failure(db, request, LIST_FAILED) from exc

    return ApiResponse[List[MenuItemOut]](
        success=True,
        data=[serialize_menu_item(m) for m in items],
        message=list_message(len(items)),
    )


@menu_items_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[MenuItemOut],
    response_model_exclude_unset=True,
    summary="Ajouter un plat",
    description="Ajoute un plat au menu. Le nom du plat est obligatoire et doit être unique.",
    responses={
        400: _error(f"{NAME_REQUIRED} / {DUPLICATE_NAME}"),
        500: _error(CREATE_FAILED),
    },
)
def create_menu_item(
    request: Request,
    payload: Optional[MenuItemCreate] = None,
    db: Session = Depends(get_db),
) -> ApiResponse[MenuItemOut]:
    """Create a new menu item after checking that its name is free."""
    name = payload.name if payload is not None else None
    if not name or not name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NAME_REQUIRED)

    try:
        existing = db.query(MenuItem).filter(MenuItem.name == name).first()
        if existing:
            logger.info("Rejected duplicate menu item name: %s (existing id=%d)", name, existing.id)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_NAME)

        item = MenuItem(name=name)
        db.add(item)
        db.commit()
        db.refresh(item)
    except SQLAlchemyError as exc:
        raise persistence_failure(db, request, CREATE_FAILED) from exc

    logger.info("Created menu item: %s (id=%d)", item.name, item.id)
    return ApiResponse[MenuItemOut](
        success=True,
        data=serialize_menu_item(item),
        message=CREATED,
    )


# Registered before /{item_id} so "search" is not taken for an id
@menu_items_router.get(
    "/search",
    response_model=ApiResponse[List[MenuItemOut]],
    response_model_exclude_unset=True,
    summary="Rechercher des plats par nom",
    description="Recherche les plats dont le nom contient la chaîne fournie (insensible à la casse).",
    responses={
        400: _error(SEARCH_TERM_REQUIRED),
        500: _error(SEARCH_FAILED),
    },
)
def search_menu_items(
    request: Request,
    name: Optional[str] = Query(
        default=None,
        description="Nom (ou partie du nom) du plat à rechercher",
        examples=["piz"],
    ),
    db: Session = Depends(get_db),
) -> ApiResponse[List[MenuItemOut]]:
    """Search menu items whose name contains the term, ignoring case."""
    if name is None or not name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SEARCH_TERM_REQUIRED)

    term = name.lower()
    try:
        items = (
            db.query(MenuItem)
            .filter(MenuItem.name.icontains(term, autoescape=True))
            .order_by(MenuItem.id.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise persistence_failure(db, request, SEARCH_FAILED) from exc

    logger.debug("Search %r matched %d menu item(s)", term, len(items))
    return ApiResponse[List[MenuItemOut]](
        success=True,
        data=[serialize_menu_item(m) for m in items],
    )


@menu_items_router.get(
    "/{item_id}",
    response_model=ApiResponse[MenuItemOut],
    response_model_exclude_unset=True,
    summary="Récupérer un plat par ID",
    description="Récupère un plat spécifique à partir de son ID.",
    responses={
        400: _error(INVALID_ID),
        404: _error(NOT_FOUND),
        500: _error(GET_FAILED),
    },
)
def get_menu_item(
    request: Request,
    menu_item_id: int = Depends(valid_item_id),
    db: Session = Depends(get_db),
) -> ApiResponse[MenuItemOut]:
    """Get a specific menu item by ID."""
    try:
        item = db.query(MenuItem).filter(MenuItem.id == menu_item_id).first()
    except SQLAlchemyError as exc:
        raise persistence_failure(db, request, GET_FAILED) from exc

    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    return ApiResponse[MenuItemOut](
        success=True,
        data=serialize_menu_item(item),
        message=RETRIEVED,
    )


@menu_items_router.put(
    "/{item_id}",
    response_model=ApiResponse[MenuItemOut],
    response_model_exclude_unset=True,
    summary="Mettre à jour un plat par ID",
    description=(
        "Met à jour les informations d'un plat spécifique à partir de son ID. "
        "Seuls les champs fournis sont modifiés."
    ),
    responses={
        400: _error(f"{INVALID_ID} / Le corps de la requête est invalide"),
        404: _error(NOT_FOUND),
        500: _error(UPDATE_FAILED),
    },
)
def update_menu_item(
    request: Request,
    menu_item_id: int = Depends(valid_item_id),
    payload: Optional[MenuItemUpdate] = None,
    db: Session = Depends(get_db),
) -> ApiResponse[MenuItemOut]:
    """
    Update a menu item.

    The name is not re-checked for uniqueness here, unlike on creation; a
    rename onto an existing name is refused by the UNIQUE constraint and
    reported as a database error.
    """
    changes = payload.model_dump(exclude_unset=True) if payload is not None else {}

    try:
        item = db.query(MenuItem).filter(MenuItem.id == menu_item_id).first()
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

        for field, value in changes.items():
            setattr(item, field, value)
        item.updated_at = func.now()

        db.commit()
        db.refresh(item)
    except SQLAlchemyError as exc:
        raise persistence_failure(db, request, UPDATE_FAILED) from exc

    logger.info("Updated menu item: %s (id=%d, fields=%s)", item.name, item.id, sorted(changes))
    return ApiResponse[MenuItemOut](
        success=True,
        data=serialize_menu_item(item),
        message=UPDATED,
    )


@menu_items_router.delete(
    "/{item_id}",
    response_model=ApiResponse[None],
    response_model_exclude_unset=True,
    summary="Supprimer un plat par ID",
    description="Supprime un plat spécifique à partir de son ID.",
    responses={
        400: _error(INVALID_ID),
        404: _error(NOT_FOUND),
        500: _error(DELETE_FAILED),
    },
)
def delete_menu_item(
    request: Request,
    menu_item_id: int = Depends(valid_item_id),
    db: Session = Depends(get_db),
) -> ApiResponse[None]:
    """Delete a menu item."""
    try:
        item = db.query(MenuItem).filter(MenuItem.id == menu_item_id).first()
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

        name = item.name
        db.delete(item)
        db.commit()
    except SQLAlchemyError as exc:
        raise persistence_failure(db, request, DELETE_FAILED) from exc

    logger.info("Deleted menu item: %s (id=%d)", name, menu_item_id)
    return ApiResponse[None](
        success=True,
        data=None,
        message=DELETED,
    )
