"""
Exception handlers rendering failures as the error envelope.

Routes signal client and server errors by raising HTTPException with the
message to show; the handlers below turn those (and the framework's own 404 /
405 responses) into {"success": false, "error": <detail>}. Malformed request
bodies are reported as a generic 400 without echoing validation internals.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .schemas.responses import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_BODY = "Le corps de la requête est invalide"


def error_response(status_code: int, error: str, headers=None) -> JSONResponse:
    body = ErrorResponse(error=error)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, INVALID_BODY)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
