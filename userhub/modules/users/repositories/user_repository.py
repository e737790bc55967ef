"""
User Repository

Handles all database operations for users table.
"""
import logging
import sqlite3
from typing import Optional, List, Dict, Any
from asyncpg.exceptions import UniqueViolationError
from databases import Database
from userhub.modules.database import database

logger = logging.getLogger("userhub.users.repository")

USER_COLUMNS = "id, name, email, password_hash, created_at, updated_at"

# Driver errors raised when a write hits the users.email UNIQUE constraint
UNIQUE_VIOLATIONS = (sqlite3.IntegrityError, UniqueViolationError)


class UserRepository:
    """Repository for user data access."""

    def __init__(self, db: Optional[Database] = None):
        self.db = db or database

    async def list_all(self) -> List[Dict[str, Any]]:
        """
        List every user by creation time.

        created_at has one-second resolution; users created within the same
        second come back in no particular order.
        """
        query = f"""
            SELECT {USER_COLUMNS}
            FROM users
            ORDER BY created_at, id
        """
        rows = await self.db.fetch_all(query)
        return [dict(row) for row in rows]

    async def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get user by ID."""
        query = f"""
            SELECT {USER_COLUMNS}
            FROM users
            WHERE id = :user_id
        """
        row = await self.db.fetch_one(query, {"user_id": user_id})
        if not row:
            return None
        return dict(row)

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get user by email."""
        query = f"""
            SELECT {USER_COLUMNS}
            FROM users
            WHERE email = :email
        """
        row = await self.db.fetch_one(query, {"email": email})
        if not row:
            return None
        return dict(row)

    async def get_password_hash(self, user_id: str) -> Optional[str]:
        """Get the stored password hash for a user."""
        query = "SELECT password_hash FROM users WHERE id = :user_id"
        return await self.db.fetch_val(query, {"user_id": user_id})

    async def _exists(self, user_id: str) -> bool:
        query = "SELECT 1 FROM users WHERE id = :user_id"
        return await self.db.fetch_val(query, {"user_id": user_id}) is not None

    async def _execute_unique(self, query: str, values: Dict[str, Any]) -> bool:
        """Run a write that may collide on users.email. Returns False on collision."""
        try:
            await self.db.execute(query, values)
        except UNIQUE_VIOLATIONS as e:
            # sqlite reports NOT NULL and CHECK failures as IntegrityError too
            if isinstance(e, sqlite3.IntegrityError) and "UNIQUE" not in str(e):
                raise
            logger.debug(f"[UserRepository] unique constraint rejected write: {e}")
            return False
        return True

    async def insert(
        self,
        user_id: str,
        name: Optional[str],
        email: Optional[str],
        password_hash: str
    ) -> bool:
        """Insert a new user. Returns False if the email is already in use."""
        query = """
            INSERT INTO users (id, name, email, password_hash)
            VALUES (:user_id, :name, :email, :password_hash)
        """
        return await self._execute_unique(query, {
            "user_id": user_id,
            "name": name,
            "email": email,
            "password_hash": password_hash
        })

    async def update(
        self,
        user_id: str,
        name: Optional[str],
        email: Optional[str]
    ) -> bool:
        """
        Update name and email. Returns False if the user does not exist or
        another user already holds the email.
        """
        if not await self._exists(user_id):
            return False
        query = """
            UPDATE users
            SET name = :name, email = :email, updated_at = CURRENT_TIMESTAMP
            WHERE id = :user_id
        """
        return await self._execute_unique(query, {"user_id": user_id, "name": name, "email": email})

    async def update_password(self, user_id: str, password_hash: str) -> bool:
        """Replace the stored password hash. Returns False if the user does not exist."""
        if not await self._exists(user_id):
            return False
        query = """
            UPDATE users
            SET password_hash = :password_hash, updated_at = CURRENT_TIMESTAMP
            WHERE id = :user_id
        """
        await self.db.execute(query, {"user_id": user_id, "password_hash": password_hash})
        return True

    async def delete(self, user_id: str) -> bool:
        """Hard delete user. Returns False if the user does not exist."""
        if not await self._exists(user_id):
            return False
        query = "DELETE FROM users WHERE id = :user_id"
        await self.db.execute(query, {"user_id": user_id})
        return True
