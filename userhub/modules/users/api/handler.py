"""
User Request Handler

Stateless façade over a UserStore. Each operation validates its inputs,
calls the store and returns Ok(body) or Err(ApiError). Store exceptions are
not caught here.
"""
import logging
from typing import Optional
from userhub.modules.errors import ErrorType, error_responder
from userhub.modules.users.domain.result import Ok, Err, Result
from userhub.modules.users.services.store import UserStore

logger = logging.getLogger("userhub.users.handler")


def _fail(error_type: ErrorType, message: str) -> Err:
    return Err(error_responder(error_type, message))


class UserRequestHandler:
    """Request handler for user CRUD and password changes."""

    def __init__(self, store: UserStore):
        self.store = store

    async def list_users(self) -> Result:
        logger.debug("[UserRequestHandler.list_users]")
        users = await self.store.list_users()
        return Ok(users)

    async def get_user(self, user_id: str) -> Result:
        logger.debug(f"[UserRequestHandler.get_user] user_id={user_id}")
        user = await self.store.get_user(user_id)
        if not user:
            return _fail(ErrorType.UNPROCESSABLE_ENTITY, "Unknown user")
        return Ok(user)

    async def create_user(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        password_confirm: Optional[str]
    ) -> Result:
        """
        Create a user.

        Order: password confirmation, then email uniqueness, then the store
        create. A failed check never reaches the next step.
        """
        logger.debug(f"[UserRequestHandler.create_user] email={email}")

        if password != password_confirm:
            return _fail(ErrorType.INVALID_PASSWORD, "Invalid Password")

        if await self.store.is_email_taken(email):
            return _fail(ErrorType.EMAIL_ALREADY_TAKEN, "EMAIL_ALREADY_TAKEN")

        success = await self.store.create_user(name, email, password)
        if not success:
            return _fail(ErrorType.UNPROCESSABLE_ENTITY, "Failed to create user")

        return Ok({"name": name, "email": email})

    async def update_user(
        self,
        user_id: str,
        name: Optional[str],
        email: Optional[str]
    ) -> Result:
        """
        Update name and email.

        The uniqueness check does not exempt the user's own current email, so
        resubmitting an unchanged email is rejected as EMAIL_ALREADY_TAKEN.
        """
        logger.debug(f"[UserRequestHandler.update_user] user_id={user_id}, email={email}")

        if await self.store.is_email_taken(email):
            return _fail(ErrorType.EMAIL_ALREADY_TAKEN, "EMAIL_ALREADY_TAKEN")

        success = await self.store.update_user(user_id, name, email)
        if not success:
            # Message shared with create_user; clients match on it.
            return _fail(ErrorType.UNPROCESSABLE_ENTITY, "Failed to create user")

        return Ok({"id": user_id})

    async def delete_user(self, user_id: str) -> Result:
        logger.debug(f"[UserRequestHandler.delete_user] user_id={user_id}")

        success = await self.store.delete_user(user_id)
        if not success:
            return _fail(ErrorType.UNPROCESSABLE_ENTITY, "Failed to delete user")

        return Ok({"id": user_id})

    async def change_password(
        self,
        user_id: str,
        old_password: Optional[str],
        new_password: Optional[str],
        confirm_password: Optional[str]
    ) -> Result:
        """
        Change a user's password.

        The response echoes oldPassword and newPassword in plaintext; existing
        consumers read that shape.
        """
        logger.debug(f"[UserRequestHandler.change_password] user_id={user_id}")

        if new_password != confirm_password:
            return _fail(
                ErrorType.INVALID_PASSWORD,
                "New Password and Confirm Password do not match"
            )

        if old_password == new_password:
            return _fail(
                ErrorType.INVALID_PASSWORD,
                "New Password must be different from Old Password"
            )

        changed = await self.store.check_old_password_and_update(
            user_id, old_password, new_password
        )
        if not changed:
            return _fail(ErrorType.UNPROCESSABLE_ENTITY, "Failed to change Password")

        return Ok({
            "id": user_id,
            "oldPassword": old_password,
            "newPassword": new_password,
        })
