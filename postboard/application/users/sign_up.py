"""
Use case: Register a new user.

Input: SignUpCommand
Output: UserResult
Side effects: Inserts one user with a hashed password.
Failure cases: BadParamsError (missing fields, mismatched confirmation,
email or nickname already taken).
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from postboard.application.users.dtos import SignUpCommand, UserResult, to_user_result
from postboard.domain.entities import User
from postboard.domain.errors import BadParamsError
from postboard.domain.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class SignUpUseCase:
    """Creates an account after validating the credentials."""

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def execute(self, command: SignUpCommand) -> UserResult:
        """Run the sign-up use case.

        Raises:
            BadParamsError: If a field is blank, the confirmation does not
                match, or the email/nickname is taken.
        """
        email = command.email.strip()
        nickname = command.nickname.strip()
        if not email or not nickname or not command.password:
            raise BadParamsError()
        if command.password != command.password_confirmation:
            raise BadParamsError()
        if self._user_repo.get_by_email(email) is not None:
            logger.warning("Sign-up rejected: email already registered")
            raise BadParamsError()

        now = datetime.now(timezone.utc)
        user = User(
            id=uuid4(),
            email=email,
            hashed_password=self._hasher.hash(command.password),
            nickname=nickname,
            profile_picture=command.profile_picture or None,
            created_at=now,
            updated_at=now,
        )
        self._user_repo.add(user)
        logger.info("Registered user=%s", user.id)
        return to_user_result(user)
