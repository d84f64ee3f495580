"""
Use case: Create a post owned by the caller.

Input: CreatePostCommand (caller, title, body)
Output: PostResult
Side effects: Inserts one post.
Failure cases: BadParamsError when the title is blank.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from postboard.application.posts.dtos import CreatePostCommand, PostResult, to_post_result
from postboard.domain.entities import Post
from postboard.domain.errors import BadParamsError
from postboard.domain.ports import PostRepository

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Creates a post. The owner is always the caller."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: CreatePostCommand) -> PostResult:
        """Run the create post use case.

        Raises:
            BadParamsError: If the title is missing or blank.
        """
        title = (command.title or "").strip()
        if not title:
            raise BadParamsError()

        now = datetime.now(timezone.utc)
        post = Post(
            id=uuid4(),
            title=title,
            body=command.body or "",
            owner=command.caller.id,
            created_at=now,
            updated_at=now,
            owner_nickname=command.caller.nickname,
        )
        self._post_repo.add(post)
        logger.info("Created post=%s for user=%s", post.id, command.caller.id)
        return to_post_result(post)
