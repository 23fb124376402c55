"""
FastAPI dependencies shared by the endpoint modules.

The service instance is created once in ``main.create_app`` and kept
on ``app.state`` so tests can build an app around any repository.
"""

from fastapi import Request

from user_management_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` attached to the running application."""
    return request.app.state.user_service
