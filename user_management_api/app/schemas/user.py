"""
Pydantic models for user data.

``UserDto`` is the transfer object used both for request bodies and
for responses.  Field names follow Python conventions while the JSON
representation uses camelCase aliases (``firstName``, ``dateOfBirth``
and so on).  Either form is accepted on input.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserDto(BaseModel):
    """Schema for creating, updating and reading a user.

    ``id`` is ignored when creating a user; the database assigns it.
    ``email`` is stored as given, without format or uniqueness checks.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: Optional[int] = Field(None, examples=[1])
    first_name: str = Field(..., alias="firstName", examples=["Emma"])
    last_name: str = Field(..., alias="lastName", examples=["Watson"])
    email: str = Field(..., examples=["emma.watson@example.com"])
    date_of_birth: Optional[date] = Field(None, alias="dateOfBirth", examples=["1990-04-15"])
