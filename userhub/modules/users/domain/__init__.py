"""
Domain Models

Pure data models representing the user entity and handler results.
"""

from .user import User
from .result import Ok, Err, Result

__all__ = [
    "User",
    "Ok",
    "Err",
    "Result",
]
