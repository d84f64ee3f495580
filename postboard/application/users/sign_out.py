"""
Use case: Invalidate the caller's bearer token.

Input: the authenticated User
Output: None
Side effects: Replaces the stored token with an unguessable value.
Failure cases: None.
"""

import logging

from postboard.domain.entities import User
from postboard.domain.ports import TokenGenerator, UserRepository

logger = logging.getLogger(__name__)


class SignOutUseCase:
    """Rotates the caller's token so the current one stops working."""

    def __init__(self, user_repo: UserRepository, tokens: TokenGenerator) -> None:
        self._user_repo = user_repo
        self._tokens = tokens

    def execute(self, caller: User) -> None:
        """Run the sign-out use case."""
        self._user_repo.update(caller.id, {"token": self._tokens.generate()})
        logger.info("Signed out user=%s", caller.id)
