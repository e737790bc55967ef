"""
User Service

Database-backed UserStore. Owns id generation and password hashing.
"""
import logging
from uuid import uuid4
from typing import Optional, List, Dict, Any
from userhub.modules.passwords import hash_password, verify_password
from userhub.modules.users.domain.user import User
from userhub.modules.users.repositories.user_repository import UserRepository
from userhub.modules.users.services.store import UserStore

logger = logging.getLogger("userhub.users.service")


class UserService(UserStore):
    """Service for user persistence operations."""

    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository or UserRepository()

    async def list_users(self) -> List[Dict[str, Any]]:
        """List all users (public fields only)."""
        logger.debug("[UserService.list_users]")
        users_data = await self.repository.list_all()
        return [User.from_dict(user_data).to_dict() for user_data in users_data]

    async def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get user by ID."""
        logger.debug(f"[UserService.get_user] user_id={user_id}")
        user_data = await self.repository.get_by_id(user_id)
        if not user_data:
            return None
        return User.from_dict(user_data).to_dict()

    async def is_email_taken(self, email: Optional[str]) -> bool:
        logger.debug(f"[UserService.is_email_taken] email={email}")
        if email is None:
            return False
        return await self.repository.get_by_email(email) is not None

    async def create_user(self, name: Optional[str], email: Optional[str], password: str) -> bool:
        """Create a new user account with a hashed password."""
        logger.debug(f"[UserService.create_user] name={name}, email={email}")
        if password is None:
            return False

        user_id = uuid4().hex
        created = await self.repository.insert(
            user_id=user_id,
            name=name,
            email=email,
            password_hash=hash_password(password)
        )
        if created:
            logger.info(f"[UserService.create_user] created user_id={user_id}")
        return created

    async def update_user(self, user_id: str, name: Optional[str], email: Optional[str]) -> bool:
        logger.debug(f"[UserService.update_user] user_id={user_id}, email={email}")
        return await self.repository.update(user_id, name, email)

    async def delete_user(self, user_id: str) -> bool:
        logger.debug(f"[UserService.delete_user] user_id={user_id}")
        return await self.repository.delete(user_id)

    async def check_old_password_and_update(
        self, user_id: str, old_password: str, new_password: str
    ) -> bool:
        """Verify the current password, then store the new one."""
        logger.debug(f"[UserService.check_old_password_and_update] user_id={user_id}")
        if new_password is None:
            return False

        stored_hash = await self.repository.get_password_hash(user_id)
        if not stored_hash or not verify_password(old_password, stored_hash):
            return False

        return await self.repository.update_password(user_id, hash_password(new_password))
