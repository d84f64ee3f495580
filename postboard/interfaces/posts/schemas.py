"""
Pydantic schemas for post request/response validation.

Request bodies wrap their fields in a ``post`` object. Unknown keys,
including ``owner``, are ignored: a post's owner is always the caller.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from postboard.application.posts.dtos import PostResult

TITLE_MAX_LEN = 255


class NewPostFields(BaseModel):
    """Fields accepted when creating a post."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN)
    body: str = Field(default="", description="Post text")


class CreatePostRequest(BaseModel):
    """Request schema for POST /posts."""

    post: NewPostFields


class PostPatchFields(BaseModel):
    """Fields accepted when patching a post. Empty strings are ignored."""

    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LEN)
    body: Optional[str] = None


class UpdatePostRequest(BaseModel):
    """Request schema for PATCH /posts/{id}."""

    post: PostPatchFields


class OwnerItem(BaseModel):
    """The owner of a post, as returned with it."""

    id: UUID
    nickname: Optional[str] = None


class PostItem(BaseModel):
    """A single post in a response."""

    id: UUID
    title: str
    body: str
    owner: OwnerItem
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, result: PostResult) -> "PostItem":
        return cls(
            id=result.id,
            title=result.title,
            body=result.body,
            owner=OwnerItem(id=result.owner_id, nickname=result.owner_nickname),
            created_at=result.created_at,
            updated_at=result.updated_at,
        )


class PostResponse(BaseModel):
    """Response schema for a single post."""

    post: PostItem


class LatestPostResponse(BaseModel):
    """Response schema for the caller's latest post, which may not exist."""

    post: Optional[PostItem] = None


class PostListResponse(BaseModel):
    """Response schema for post listings."""

    posts: list[PostItem]
