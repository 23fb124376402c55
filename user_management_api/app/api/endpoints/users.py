"""
User endpoints.

CRUD routes for user records mounted under ``/api/users``.  Handlers
only translate between HTTP and ``UserService``; a missing user is
raised as ``UserNotFoundError`` by the service and turned into a 404
by the exception handlers registered in ``main.create_app``.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from user_management_api.app.api.deps import get_user_service
from user_management_api.app.schemas.user import UserDto
from user_management_api.app.services.user_service import UserService


# Ids are SQLite INTEGERs; larger values are rejected as malformed.
MAX_USER_ID = 2**63 - 1

router = APIRouter()


@router.post("", response_model=UserDto, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserDto,
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Create a new user.

    The ``id`` in the body, if any, is ignored.  Returns the created
    record with its assigned id.
    """
    return await service.create_user(user)


@router.get("/{user_id}", response_model=UserDto)
async def get_user(
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Retrieve a single user by ID."""
    return await service.get_user_by_id(user_id)


@router.get("", response_model=List[UserDto])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserDto]:
    """Return all users.  An empty list is returned when there are none."""
    return await service.get_all_users()


@router.put("/{user_id}", response_model=UserDto)
async def update_user(
    user: UserDto,
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Replace an existing user's fields.

    Every field is overwritten with the body's value; an omitted
    ``dateOfBirth`` clears the stored date.
    """
    return await service.update_user(user_id, user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user by ID."""
    await service.delete_user(user_id)
