"""
Use case: List the caller's own posts.

Input: the authenticated User
Output: list[PostResult], newest first.
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from postboard.application.posts.dtos import PostResult, to_post_result
from postboard.domain.entities import User
from postboard.domain.ports import PostRepository

logger = logging.getLogger(__name__)


class ListMyPostsUseCase:
    """Returns only the posts owned by the caller."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, caller: User) -> list[PostResult]:
        """Run the list-my-posts use case.

        Args:
            caller: The authenticated user.

        Returns:
            The caller's posts, newest first.
        """
        posts = self._post_repo.list_by_owner(caller.id)
        logger.info("Listed %d posts for user=%s", len(posts), caller.id)
        return [to_post_result(p) for p in posts]
