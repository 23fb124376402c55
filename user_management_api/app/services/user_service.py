"""
Business logic for users.

``UserService`` wraps a ``UserRepository`` and converts between the
stored ``User`` entity and the ``UserDto`` schema returned by the API.
Every id-addressed operation raises ``UserNotFoundError`` when the
record does not exist; repository errors are left to propagate.
"""

import logging
from typing import List

from ..core.exceptions import UserNotFoundError
from ..mappers.user_mapper import UserMapper
from ..repositories.user_repository import UserRepository
from ..schemas.user import UserDto


logger = logging.getLogger(__name__)


class UserService:
    """CRUD operations over users."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def create_user(self, data: UserDto) -> UserDto:
        """Persist a new user and return it with its assigned id.

        Any ``id`` present in ``data`` is discarded.
        """
        user = UserMapper.to_entity(data)
        user.id = None
        saved = self.repository.save(user)
        logger.info("Created user %s", saved.id)
        return UserMapper.to_dto(saved)

    async def get_user_by_id(self, user_id: int) -> UserDto:
        """Return the user with the given id."""
        user = self.repository.find_by_id(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return UserMapper.to_dto(user)

    async def get_all_users(self) -> List[UserDto]:
        """Return every stored user in repository order."""
        return [UserMapper.to_dto(user) for user in self.repository.find_all()]

    async def update_user(self, user_id: int, data: UserDto) -> UserDto:
        """Replace every field of an existing user.

        This is a full replacement: fields omitted from ``data`` (such
        as ``date_of_birth``) are cleared rather than kept.  The stored
        id is preserved regardless of ``data.id``.
        """
        user = self.repository.find_by_id(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        user.first_name = data.first_name
        user.last_name = data.last_name
        user.email = data.email
        user.date_of_birth = data.date_of_birth
        saved = self.repository.save(user)
        logger.info("Updated user %s", user_id)
        return UserMapper.to_dto(saved)

    async def delete_user(self, user_id: int) -> None:
        """Delete a user.

        Existence is checked before anything is removed so a missing id
        is reported explicitly instead of being a silent no-op.
        """
        if not self.repository.exists_by_id(user_id):
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        self.repository.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)
