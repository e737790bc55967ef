"""
User Store Contract

The persistence collaborator the request handler talks to. Implementations
report business failures through their return values and let unexpected
faults raise.
"""
from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any


class UserStore(ABC):
    """Abstract store backing User entities."""

    @abstractmethod
    async def list_users(self) -> List[Dict[str, Any]]:
        """Return every user."""

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Return the user with this id, or None."""

    @abstractmethod
    async def is_email_taken(self, email: Optional[str]) -> bool:
        """Return True if any user already has this email."""

    @abstractmethod
    async def create_user(self, name: Optional[str], email: Optional[str], password: str) -> bool:
        """Create a user; False if the store could not create it."""

    @abstractmethod
    async def update_user(self, user_id: str, name: Optional[str], email: Optional[str]) -> bool:
        """Update name and email; False if the store could not update."""

    @abstractmethod
    async def delete_user(self, user_id: str) -> bool:
        """Delete a user; False if the store could not delete."""

    @abstractmethod
    async def check_old_password_and_update(
        self, user_id: str, old_password: str, new_password: str
    ) -> bool:
        """Verify old_password and store new_password; False on any mismatch."""
