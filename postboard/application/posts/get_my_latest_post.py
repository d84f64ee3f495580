"""
Use case: Get the caller's most recent post.

Input: the authenticated User
Output: PostResult or None when the caller has not posted yet.
Side effects: None (read-only query).
Failure cases: None.
"""

import logging
from typing import Optional

from postboard.application.posts.dtos import PostResult, to_post_result
from postboard.domain.entities import User
from postboard.domain.ports import PostRepository

logger = logging.getLogger(__name__)


class GetMyLatestPostUseCase:
    """Returns the newest post owned by the caller, if any."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, caller: User) -> Optional[PostResult]:
        """Run the latest-post use case."""
        logger.info("Fetching latest post for user=%s", caller.id)
        post = self._post_repo.latest_by_owner(caller.id)
        if post is None:
            return None
        return to_post_result(post)
