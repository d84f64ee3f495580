"""
Use case: Show a single post.

Input: ShowPostQuery (raw post id)
Output: PostResult
Side effects: None (read-only query).
Failure cases: DocumentNotFoundError.
"""

import logging

from postboard.application.ids import parse_id
from postboard.application.posts.dtos import PostResult, ShowPostQuery, to_post_result
from postboard.domain.guards import handle_404
from postboard.domain.ports import PostRepository

logger = logging.getLogger(__name__)


class ShowPostUseCase:
    """Loads one post by id."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, query: ShowPostQuery) -> PostResult:
        """Run the show post use case.

        Raises:
            DocumentNotFoundError: If no post has the given id.
        """
        logger.info("Showing post=%s", query.post_id)
        post_id = parse_id(query.post_id)
        post = handle_404(
            self._post_repo.get_by_id(post_id) if post_id is not None else None
        )
        return to_post_result(post)
