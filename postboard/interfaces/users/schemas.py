"""
Pydantic schemas for account and profile endpoints.

Credential bodies wrap their fields in ``credentials`` (sign-up,
sign-in) or ``passwords`` (change password). Password hashes never
appear in a response; the token only appears in the sign-in response.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from postboard.application.users.dtos import UserResult
from postboard.core.config import settings

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"
EMAIL_MAX_LEN = 255


class SignUpCredentials(BaseModel):
    """Fields required to register."""

    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)
    password_confirmation: str
    nickname: str = Field(
        ...,
        min_length=settings.nickname_min_length,
        max_length=settings.nickname_max_length,
    )
    profile_picture: Optional[str] = None

    @field_validator("email", "nickname", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class SignUpRequest(BaseModel):
    """Request schema for POST /sign-up."""

    credentials: SignUpCredentials


class SignInCredentials(BaseModel):
    """Fields required to sign in."""

    email: str
    password: str


class SignInRequest(BaseModel):
    """Request schema for POST /sign-in."""

    credentials: SignInCredentials


class Passwords(BaseModel):
    """Old and new password for a password change."""

    old: str
    new: str


class ChangePasswordRequest(BaseModel):
    """Request schema for PATCH /change-password."""

    passwords: Passwords


class UserPatchFields(BaseModel):
    """Profile fields a user may change. Empty strings are ignored."""

    nickname: Optional[str] = None
    profile_picture: Optional[str] = None

    @field_validator("nickname", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("nickname")
    @classmethod
    def _nickname_length(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return value
        if not settings.nickname_min_length <= len(value) <= settings.nickname_max_length:
            raise ValueError(
                f"nickname must be {settings.nickname_min_length}-"
                f"{settings.nickname_max_length} characters"
            )
        return value


class UpdateUserRequest(BaseModel):
    """Request schema for PATCH /users/{id}."""

    user: UserPatchFields


class UserItem(BaseModel):
    """Public view of a user."""

    id: UUID
    email: str
    nickname: str
    profile_picture: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, result: UserResult) -> "UserItem":
        return cls(
            id=result.id,
            email=result.email,
            nickname=result.nickname,
            profile_picture=result.profile_picture,
            created_at=result.created_at,
            updated_at=result.updated_at,
        )


class SignedInUserItem(UserItem):
    """A user together with the bearer token just issued to them."""

    token: str

    @classmethod
    def from_result(cls, result: UserResult) -> "SignedInUserItem":
        return cls(
            **UserItem.from_result(result).model_dump(),
            token=result.token,
        )


class UserResponse(BaseModel):
    """Response schema for a single user."""

    user: UserItem


class SignInResponse(BaseModel):
    """Response schema for POST /sign-in."""

    user: SignedInUserItem
