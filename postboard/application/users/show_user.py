"""
Use case: Show a user's public profile.

Input: ShowUserQuery (raw user id)
Output: UserResult
Side effects: None (read-only query).
Failure cases: DocumentNotFoundError.
"""

from postboard.application.ids import parse_id
from postboard.application.users.dtos import ShowUserQuery, UserResult, to_user_result
from postboard.domain.guards import handle_404
from postboard.domain.ports import UserRepository


class ShowUserUseCase:
    """Loads one user by id."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: ShowUserQuery) -> UserResult:
        """Run the show user use case."""
        user_id = parse_id(query.user_id)
        user = handle_404(
            self._user_repo.get_by_id(user_id) if user_id is not None else None
        )
        return to_user_result(user)
