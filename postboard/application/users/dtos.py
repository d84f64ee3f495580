"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
Password hashes never appear in an output DTO.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from postboard.domain.entities import User


@dataclass(frozen=True)
class SignUpCommand:
    """Input DTO for registering a new user.

    Attributes:
        email: Login email. Must be unique.
        password: Plain-text password.
        password_confirmation: Must equal ``password``.
        nickname: Public display name. Must be unique.
        profile_picture: Optional picture URL.
    """

    email: str
    password: str
    password_confirmation: str
    nickname: str
    profile_picture: Optional[str] = None


@dataclass(frozen=True)
class SignInCommand:
    """Input DTO for exchanging credentials for a bearer token."""

    email: str
    password: str


@dataclass(frozen=True)
class ChangePasswordCommand:
    """Input DTO for replacing the caller's password."""

    caller: User
    old_password: str
    new_password: str


@dataclass(frozen=True)
class ShowUserQuery:
    """Input DTO for reading a user profile."""

    user_id: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for patching the caller's own profile."""

    caller: User
    user_id: str
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting the caller's own account."""

    caller: User
    user_id: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a user.

    ``token`` is only set in the result of a sign-in.
    """

    id: UUID
    email: str
    nickname: str
    profile_picture: Optional[str]
    created_at: datetime
    updated_at: datetime
    token: Optional[str] = None


def to_user_result(user: User, include_token: bool = False) -> UserResult:
    """Map a User entity to its public output DTO."""
    return UserResult(
        id=user.id,
        email=user.email,
        nickname=user.nickname,
        profile_picture=user.profile_picture,
        created_at=user.created_at,
        updated_at=user.updated_at,
        token=user.token if include_token else None,
    )
