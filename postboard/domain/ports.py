"""
Port interfaces (ABCs) for posts and users.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from postboard.domain.entities import Post, User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Return a user by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return a user by email, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_token(self, token: str) -> Optional[User]:
        """Return the user currently holding ``token``, or None."""
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user.

        Raises:
            BadParamsError: If the email or nickname is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, user_id: UUID, changes: dict[str, Any]) -> Optional[User]:
        """Apply ``changes`` to a user and return the stored result.

        Returns None if the user does not exist.

        Raises:
            BadParamsError: If a change violates a uniqueness constraint.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: UUID) -> int:
        """Remove a user together with every post they own, atomically.

        Returns the number of posts removed.
        """
        raise NotImplementedError


class PostRepository(ABC):
    """Port for persisting and retrieving posts.

    Read methods return posts with ``owner_nickname`` populated,
    ordered newest first.
    """

    @abstractmethod
    def list_recent(self) -> list[Post]:
        """Return every post, newest first."""
        raise NotImplementedError

    @abstractmethod
    def list_by_owner(self, owner_id: UUID) -> list[Post]:
        """Return the posts owned by ``owner_id``, newest first."""
        raise NotImplementedError

    @abstractmethod
    def latest_by_owner(self, owner_id: UUID) -> Optional[Post]:
        """Return the newest post owned by ``owner_id``, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, post_id: UUID) -> Optional[Post]:
        """Return a post by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def add(self, post: Post) -> None:
        """Persist a new post."""
        raise NotImplementedError

    @abstractmethod
    def update(self, post_id: UUID, changes: dict[str, Any]) -> Optional[Post]:
        """Apply ``changes`` to a post and return the stored result, or None."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, post_id: UUID) -> None:
        """Remove a post."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash for ``password``."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """Return True if ``password`` matches the ``encoded`` hash."""
        raise NotImplementedError


class TokenGenerator(ABC):
    """Port for issuing opaque bearer tokens."""

    @abstractmethod
    def generate(self) -> str:
        """Return a new random token."""
        raise NotImplementedError
