"""
Use case: Change the caller's password.

Input: ChangePasswordCommand (caller, old password, new password)
Output: None
Side effects: Stores a new password hash.
Failure cases: BadCredentialsError (wrong old password),
BadParamsError (blank new password).
"""

import logging

from postboard.application.users.dtos import ChangePasswordCommand
from postboard.domain.errors import BadCredentialsError, BadParamsError
from postboard.domain.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """Replaces the caller's password after checking the old one."""

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def execute(self, command: ChangePasswordCommand) -> None:
        """Run the change password use case.

        Raises:
            BadCredentialsError: If the old password is wrong.
            BadParamsError: If the new password is blank.
        """
        caller = command.caller
        if not self._hasher.verify(command.old_password, caller.hashed_password):
            logger.warning("Password change rejected for user=%s", caller.id)
            raise BadCredentialsError()
        if not command.new_password:
            raise BadParamsError()

        self._user_repo.update(
            caller.id, {"hashed_password": self._hasher.hash(command.new_password)}
        )
        logger.info("Changed password for user=%s", caller.id)
