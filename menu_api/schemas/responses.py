"""
Response envelope schemas.

Every endpoint answers with the same JSON wrapper:

    {"success": true, "data": ..., "message": "..."}
    {"success": false, "error": "..."}

ApiResponse is declared as the response_model of the routes (with
response_model_exclude_unset so absent keys stay absent). ErrorResponse only
documents the failure shape in the OpenAPI document; failures are rendered by
the handlers in error_handlers.py.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope. data is always set, message is optional."""
    success: bool = Field(examples=[True])
    data: Optional[T] = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Failure envelope. Never carries data or message."""
    success: bool = Field(default=False, examples=[False])
    error: str = Field(examples=["Plat non trouvé"])
