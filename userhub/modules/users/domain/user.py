"""
User Domain Model

Pure data model representing a user entity.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """User domain model."""
    id: str
    name: Optional[str]
    email: Optional[str]
    password_hash: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from dictionary (e.g., from database row)."""
        return cls(
            id=data["id"],
            name=data.get("name"),
            email=data.get("email"),
            password_hash=data.get("password_hash", ""),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def to_dict(self) -> dict:
        """Public projection of the user. The password hash is never included."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }
