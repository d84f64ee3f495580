"""
Use case: List every post.

Input: none
Output: list[PostResult], newest first, owner nickname populated.
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from postboard.application.posts.dtos import PostResult, to_post_result
from postboard.domain.ports import PostRepository

logger = logging.getLogger(__name__)


class ListPostsUseCase:
    """Returns the full post feed."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self) -> list[PostResult]:
        """Run the list posts use case."""
        posts = self._post_repo.list_recent()
        logger.info("Listed %d posts", len(posts))
        return [to_post_result(p) for p in posts]
