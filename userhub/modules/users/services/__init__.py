"""
Business Logic Services

The UserStore contract and the service that fulfils it over the repository.
"""

from .store import UserStore
from .user_service import UserService

__all__ = [
    "UserStore",
    "UserService",
]
