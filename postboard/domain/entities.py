"""
Domain entities for posts and users.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class User:
    """A registered user.

    ``hashed_password`` and ``token`` are credentials and never leave
    the application layer except for the token returned on sign-in.
    """

    id: UUID
    email: str
    hashed_password: str
    nickname: str
    created_at: datetime
    updated_at: datetime
    profile_picture: Optional[str] = None
    token: Optional[str] = None


@dataclass(frozen=True)
class Post:
    """A post written by a user.

    ``owner`` is the owning user's id. ``owner_nickname`` is filled in
    by repository reads that join the owner, and is None otherwise.
    """

    id: UUID
    title: str
    body: str
    owner: UUID
    created_at: datetime
    updated_at: datetime
    owner_nickname: Optional[str] = None
