"""
Application package for the User Management API.

The code is split into layers: ``api`` holds the FastAPI routers,
``services`` the business logic, ``repositories`` the persistence,
``models`` and ``schemas`` the entity and transfer shapes, and
``mappers`` the conversion between them.  ``core`` carries
configuration, logging, database setup and the domain exceptions.
"""

from .main import app  # noqa: F401
