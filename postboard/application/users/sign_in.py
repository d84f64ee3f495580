"""
Use case: Exchange email and password for a bearer token.

Input: SignInCommand
Output: UserResult carrying the new token.
Side effects: Replaces the user's stored token.
Failure cases: BadCredentialsError.
"""

import logging

from postboard.application.users.dtos import SignInCommand, UserResult, to_user_result
from postboard.domain.errors import BadCredentialsError
from postboard.domain.guards import handle_404
from postboard.domain.ports import PasswordHasher, TokenGenerator, UserRepository

logger = logging.getLogger(__name__)


class SignInUseCase:
    """Verifies credentials and issues a fresh token."""

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenGenerator,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    def execute(self, command: SignInCommand) -> UserResult:
        """Run the sign-in use case.

        Raises:
            BadCredentialsError: If the email is unknown or the password
                does not match.
        """
        user = self._user_repo.get_by_email(command.email.strip())
        if user is None or not self._hasher.verify(command.password, user.hashed_password):
            logger.warning("Sign-in rejected: bad credentials")
            raise BadCredentialsError()

        signed_in = handle_404(
            self._user_repo.update(user.id, {"token": self._tokens.generate()})
        )
        logger.info("Signed in user=%s", user.id)
        return to_user_result(signed_in, include_token=True)
