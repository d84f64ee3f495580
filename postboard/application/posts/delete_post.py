"""
Use case: Delete a post owned by the caller.

Input: DeletePostCommand (caller, raw post id)
Output: None
Side effects: Removes one post.
Failure cases: DocumentNotFoundError, OwnershipError.
"""

import logging

from postboard.application.ids import parse_id
from postboard.application.posts.dtos import DeletePostCommand
from postboard.domain.guards import handle_404, require_ownership
from postboard.domain.ports import PostRepository

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Deletes a post only if the caller owns it."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: DeletePostCommand) -> None:
        """Run the delete post use case.

        Raises:
            DocumentNotFoundError: If no post has the given id.
            OwnershipError: If the caller does not own the post.
        """
        post_id = parse_id(command.post_id)
        post = handle_404(
            self._post_repo.get_by_id(post_id) if post_id is not None else None
        )
        require_ownership(command.caller, post)
        self._post_repo.delete(post.id)
        logger.info("Deleted post=%s by user=%s", post.id, command.caller.id)
