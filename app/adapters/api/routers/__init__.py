# app\adapters\api\routers\__init__.py
"""
API Route Definitions.

This package contains the route handlers (controllers) organized by area.
- `candidates`: Candidate intake (multipart form + CV upload).
- `health`: System health checks.
"""

from .candidates import router as candidates_router
from .health import router as health_router

__all__ = [
    "candidates_router",
    "health_router",
]
