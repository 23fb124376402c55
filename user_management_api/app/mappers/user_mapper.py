"""Conversion between the ``User`` entity and the ``UserDto`` schema."""

from ..models.user import User
from ..schemas.user import UserDto


class UserMapper:
    """Stateless field-by-field copy in both directions.

    Neither direction validates or drops anything; ``to_entity`` copies
    ``id`` as well, so callers that must not honour a client-supplied
    id have to clear it themselves.
    """

    @staticmethod
    def to_dto(user: User) -> UserDto:
        return UserDto(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            date_of_birth=user.date_of_birth,
        )

    @staticmethod
    def to_entity(dto: UserDto) -> User:
        return User(
            id=dto.id,
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            date_of_birth=dto.date_of_birth,
        )
