"""
Top-level API router.

Aggregates the domain routers under a single router which
``main.create_app`` mounts at ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
