"""
Data Transfer Objects for the posts application layer.

DTOs carry data between the interface and application layers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from postboard.domain.entities import Post, User


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for creating a post.

    Attributes:
        caller: The authenticated user; always becomes the owner.
        title: Post title. Must not be blank.
        body: Post text.
    """

    caller: User
    title: str
    body: str = ""


@dataclass(frozen=True)
class UpdatePostCommand:
    """Input DTO for patching a post.

    Attributes:
        caller: The authenticated user.
        post_id: Raw id from the request path.
        changes: Field values supplied by the client.
    """

    caller: User
    post_id: str
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeletePostCommand:
    """Input DTO for deleting a post."""

    caller: User
    post_id: str


@dataclass(frozen=True)
class ShowPostQuery:
    """Input DTO for reading a single post."""

    post_id: str


@dataclass(frozen=True)
class PostResult:
    """Output DTO for a post.

    Attributes:
        id: Post id.
        title: Post title.
        body: Post text.
        owner_id: Id of the owning user.
        owner_nickname: Nickname of the owner when it was loaded.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    title: str
    body: str
    owner_id: UUID
    owner_nickname: Optional[str]
    created_at: datetime
    updated_at: datetime


def to_post_result(post: Post) -> PostResult:
    """Map a Post entity to its output DTO."""
    return PostResult(
        id=post.id,
        title=post.title,
        body=post.body,
        owner_id=post.owner,
        owner_nickname=post.owner_nickname,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
