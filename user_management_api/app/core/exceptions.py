"""
Domain exceptions raised by services and translated at the HTTP boundary.

Services raise these to signal that an id-addressed record does not
exist.  The exception handlers registered in ``main.create_app`` turn
them into a 404 response whose ``message`` field carries the
exception message.
"""


class ResourceNotFoundError(Exception):
    """Raised when a requested record does not exist."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UserNotFoundError(ResourceNotFoundError):
    """Raised when no user exists for the given id."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User not found with id: {user_id}")
