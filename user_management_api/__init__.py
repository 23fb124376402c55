"""
Top-level package for the User Management API.

The service itself lives in the ``app`` subpackage; the reference
HTTP client lives in ``client``.
"""

__all__ = []
