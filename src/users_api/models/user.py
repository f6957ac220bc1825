"""
User-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel


class User(BaseModel):
    """Stored user record; `id` is assigned by the store"""
    id: int
    name: str
    email: str


class UserPayload(BaseModel):
    """Request body for create and update.

    No format or uniqueness checks are applied to `email`. A client-sent
    `id` is accepted but ignored: the store always assigns or keeps its own.
    """
    name: str
    email: str
    id: Optional[int] = None
