"""
User Management API Endpoints

REST API endpoints for user CRUD operations.
Routes decode the request, call the UserRequestHandler and translate its
result: Ok becomes the 200 body, Err goes to the app's error handlers.
"""
from fastapi import APIRouter, Depends, Request
from pydantic import AliasChoices, BaseModel, Field
from typing import Any, Optional
from userhub.modules.users.api.handler import UserRequestHandler
from userhub.modules.users.domain.result import Err, Result

router = APIRouter(prefix="/api/users", tags=["users"])


# Request Models
class CreateUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    # Clients send "confrimPassword"; the corrected spelling is accepted too.
    password_confirm: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("confrimPassword", "confirmPassword", "password_confirm"),
    )


class UpdateUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    old_password: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("oldPassword", "old_password")
    )
    new_password: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("newPassword", "new_password")
    )
    confirm_password: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("confirmPassword", "confirm_password")
    )


def get_user_handler(request: Request) -> UserRequestHandler:
    """FastAPI dependency: a handler bound to the store configured on the app."""
    return UserRequestHandler(request.app.state.user_store)


def unwrap(result: Result) -> Any:
    """Return the Ok body, or hand the Err to the error handlers."""
    if isinstance(result, Err):
        raise result.error
    return result.value


@router.get("")
async def get_users(handler: UserRequestHandler = Depends(get_user_handler)):
    """List all users."""
    return unwrap(await handler.list_users())


@router.get("/{user_id}")
async def get_user(user_id: str, handler: UserRequestHandler = Depends(get_user_handler)):
    """Get user details by ID."""
    return unwrap(await handler.get_user(user_id))


@router.post("")
async def create_user(
    request: CreateUserRequest,
    handler: UserRequestHandler = Depends(get_user_handler)
):
    """Create a new user. Responds with name and email only."""
    result = await handler.create_user(
        name=request.name,
        email=request.email,
        password=request.password,
        password_confirm=request.password_confirm
    )
    return unwrap(result)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    handler: UserRequestHandler = Depends(get_user_handler)
):
    """Update a user's name and email."""
    result = await handler.update_user(user_id, name=request.name, email=request.email)
    return unwrap(result)


@router.delete("/{user_id}")
async def delete_user(user_id: str, handler: UserRequestHandler = Depends(get_user_handler)):
    """Delete a user."""
    return unwrap(await handler.delete_user(user_id))


@router.put("/{user_id}/change-password")
async def change_password(
    user_id: str,
    request: ChangePasswordRequest,
    handler: UserRequestHandler = Depends(get_user_handler)
):
    """Change a user's password after verifying the current one."""
    result = await handler.change_password(
        user_id,
        old_password=request.old_password,
        new_password=request.new_password,
        confirm_password=request.confirm_password
    )
    return unwrap(result)
