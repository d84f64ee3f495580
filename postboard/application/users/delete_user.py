"""
Use case: Delete the caller's own account and posts.

Input: DeleteUserCommand (caller, raw user id)
Output: None
Side effects: Removes the user and their posts in one transaction.
Failure cases: DocumentNotFoundError, UserValidationError.
"""

import logging

from postboard.application.ids import parse_id
from postboard.application.users.dtos import DeleteUserCommand
from postboard.domain.guards import handle_404, validate_user
from postboard.domain.ports import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Deletes an account after confirming the caller is that user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: DeleteUserCommand) -> None:
        """Run the delete user use case.

        Raises:
            DocumentNotFoundError: If no user has the given id.
            UserValidationError: If the id is not the caller's own.
        """
        user_id = parse_id(command.user_id)
        user = handle_404(
            self._user_repo.get_by_id(user_id) if user_id is not None else None
        )
        validate_user(command.caller, user)

        removed = self._user_repo.delete(user.id)
        logger.info("Deleted user=%s and %d posts", user.id, removed)
