"""User entity as stored in the ``users`` table."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class User:
    """Persisted representation of a user.

    ``id`` is ``None`` until the repository saves the record for the
    first time; after that it never changes.
    """

    id: Optional[int]
    first_name: str
    last_name: str
    email: str
    date_of_birth: Optional[date] = None
