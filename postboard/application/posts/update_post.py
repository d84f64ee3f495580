"""
Use case: Patch a post owned by the caller.

Input: UpdatePostCommand (caller, raw post id, changes)
Output: PostResult
Side effects: Updates one post.
Failure cases: DocumentNotFoundError, OwnershipError, BadParamsError
(blank title).
"""

import logging

from postboard.application.ids import parse_id
from postboard.application.posts.dtos import PostResult, UpdatePostCommand, to_post_result
from postboard.domain.errors import BadParamsError
from postboard.domain.guards import handle_404, require_ownership
from postboard.domain.ports import PostRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "body"})


def clean_post_changes(changes: dict) -> dict:
    """Keep editable fields that carry a value.

    ``owner`` and other unknown keys are dropped so clients cannot
    reassign a post. Empty strings mean "leave unchanged". A supplied
    title is stripped, and one that is only whitespace is rejected.

    Raises:
        BadParamsError: If the title is blank after stripping.
    """
    cleaned = {
        key: value
        for key, value in changes.items()
        if key in EDITABLE_FIELDS and value is not None and value != ""
    }
    if "title" in cleaned:
        cleaned["title"] = cleaned["title"].strip()
        if not cleaned["title"]:
            raise BadParamsError()
    return cleaned


class UpdatePostUseCase:
    """Applies a partial update after checking ownership."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: UpdatePostCommand) -> PostResult:
        """Run the update post use case.

        The ownership check runs before anything is written.

        Raises:
            DocumentNotFoundError: If no post has the given id.
            OwnershipError: If the caller does not own the post.
            BadParamsError: If the new title is blank.
        """
        logger.info("Updating post=%s by user=%s", command.post_id, command.caller.id)
        post_id = parse_id(command.post_id)
        post = handle_404(
            self._post_repo.get_by_id(post_id) if post_id is not None else None
        )
        require_ownership(command.caller, post)

        changes = clean_post_changes(command.changes)
        if not changes:
            return to_post_result(post)

        updated = handle_404(self._post_repo.update(post.id, changes))
        return to_post_result(updated)
