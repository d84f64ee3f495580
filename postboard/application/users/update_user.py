"""
Use case: Patch the caller's own profile.

Input: UpdateUserCommand (caller, raw user id, changes)
Output: UserResult
Side effects: Updates one user.
Failure cases: DocumentNotFoundError, UserValidationError,
BadParamsError (nickname already taken).
"""

import logging

from postboard.application.ids import parse_id
from postboard.application.users.dtos import UpdateUserCommand, UserResult, to_user_result
from postboard.domain.guards import handle_404, validate_user
from postboard.domain.ports import UserRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"nickname", "profile_picture"})


class UpdateUserUseCase:
    """Updates profile fields after confirming the caller is that user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: UpdateUserCommand) -> UserResult:
        """Run the update user use case.

        Raises:
            DocumentNotFoundError: If no user has the given id.
            UserValidationError: If the id is not the caller's own.
            BadParamsError: If the new nickname is taken.
        """
        user_id = parse_id(command.user_id)
        user = handle_404(
            self._user_repo.get_by_id(user_id) if user_id is not None else None
        )
        validate_user(command.caller, user)

        changes = {
            key: value
            for key, value in command.changes.items()
            if key in EDITABLE_FIELDS and value is not None and value != ""
        }
        if not changes:
            return to_user_result(user)

        updated = handle_404(self._user_repo.update(user.id, changes))
        logger.info("Updated profile for user=%s", user.id)
        return to_user_result(updated)
