"""
Shared fixtures: an in-memory UserStore double and an app wired to it.
"""
import pytest
from typing import Any, Dict, List, Optional
from fastapi.testclient import TestClient
from userhub.app import create_app
from userhub.modules.users.api.handler import UserRequestHandler
from userhub.modules.users.services.store import UserStore


class InMemoryUserStore(UserStore):
    """UserStore double that keeps users in a dict and records every call."""

    def __init__(self):
        self.users: Dict[str, Dict[str, Any]] = {}
        self.calls: List[str] = []
        self._next_id = 1

    def seed(self, name: str, email: str, password: str) -> str:
        user_id = str(self._next_id)
        self._next_id += 1
        self.users[user_id] = {"id": user_id, "name": name, "email": email, "password": password}
        return user_id

    @staticmethod
    def _public(user: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": user["id"], "name": user["name"], "email": user["email"]}

    async def list_users(self):
        self.calls.append("list_users")
        return [self._public(user) for user in self.users.values()]

    async def get_user(self, user_id):
        self.calls.append("get_user")
        user = self.users.get(user_id)
        return self._public(user) if user else None

    async def is_email_taken(self, email):
        self.calls.append("is_email_taken")
        return any(user["email"] == email for user in self.users.values())

    async def create_user(self, name, email, password):
        self.calls.append("create_user")
        self.seed(name, email, password)
        return True

    async def update_user(self, user_id, name, email):
        self.calls.append("update_user")
        if user_id not in self.users:
            return False
        self.users[user_id].update(name=name, email=email)
        return True

    async def delete_user(self, user_id):
        self.calls.append("delete_user")
        return self.users.pop(user_id, None) is not None

    async def check_old_password_and_update(self, user_id, old_password, new_password):
        self.calls.append("check_old_password_and_update")
        user = self.users.get(user_id)
        if not user or user["password"] != old_password:
            return False
        user["password"] = new_password
        return True

    @property
    def mutations(self) -> List[str]:
        return [
            call for call in self.calls
            if call in ("create_user", "update_user", "delete_user", "check_old_password_and_update")
        ]


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryUserStore()


@pytest.fixture
def handler(store):
    return UserRequestHandler(store)


@pytest.fixture
def client(store):
    """TestClient for an app backed by the in-memory store (no database)."""
    app = create_app(store=store)
    return TestClient(app, raise_server_exceptions=False)
