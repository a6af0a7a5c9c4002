# app/adapters/api/schemas.py
"""
HTTP-only response shapes.

Successful candidate creation returns the domain `Candidate` directly
(camelCase via its aliases); everything here documents the error bodies.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(MessageResponse):
    """Body of a 500 caused by a known persistence failure."""
    details: Optional[Any] = None


class ReadinessResponse(BaseModel):
    database: str
    storage: str


ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": MessageResponse, "description": "Missing required fields or invalid CV"},
    409: {"model": MessageResponse, "description": "Email already registered"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}
