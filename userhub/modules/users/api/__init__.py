"""
REST API Endpoints

Thin API layer that delegates to the request handler.
"""

from .handler import UserRequestHandler
from .user_endpoints import router as user_router, get_user_handler

__all__ = [
    "UserRequestHandler",
    "user_router",
    "get_user_handler",
]
