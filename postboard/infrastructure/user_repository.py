"""
Adapter: User repository.

Implements the UserRepository port on top of SQLAlchemy Core.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from postboard.domain.entities import User
from postboard.domain.errors import BadParamsError
from postboard.domain.ports import UserRepository
from postboard.infrastructure.database import as_utc, posts, users

logger = logging.getLogger(__name__)


def _to_user(row: RowMapping) -> User:
    return User(
        id=row["id"],
        email=row["email"],
        hashed_password=row["hashed_password"],
        nickname=row["nickname"],
        profile_picture=row["profile_picture"],
        token=row["token"],
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


class SqlUserRepository(UserRepository):
    """Persists users in the ``users`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _get_one(self, clause) -> Optional[User]:
        with self._engine.connect() as conn:
            row = conn.execute(select(users).where(clause)).mappings().first()
        return _to_user(row) if row is not None else None

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self._get_one(users.c.id == user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one(users.c.email == email)

    def get_by_token(self, token: str) -> Optional[User]:
        if not token:
            return None
        return self._get_one(users.c.token == token)

    def add(self, user: User) -> None:
        """Insert a user.

        Raises:
            BadParamsError: If the email or nickname already exists.
        """
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    insert(users).values(
                        id=user.id,
                        email=user.email,
                        hashed_password=user.hashed_password,
                        nickname=user.nickname,
                        profile_picture=user.profile_picture,
                        token=user.token,
                        created_at=user.created_at,
                        updated_at=user.updated_at,
                    )
                )
        except IntegrityError:
            logger.warning("Rejected duplicate user insert")
            raise BadParamsError() from None

    def update(self, user_id: UUID, changes: dict[str, Any]) -> Optional[User]:
        """Apply ``changes`` and return the stored user, or None if missing.

        Raises:
            BadParamsError: If a change collides with a unique column.
        """
        values = dict(changes, updated_at=datetime.now(timezone.utc))
        try:
            with self._engine.begin() as conn:
                conn.execute(update(users).where(users.c.id == user_id).values(**values))
        except IntegrityError:
            logger.warning("Rejected user update for user=%s: unique conflict", user_id)
            raise BadParamsError() from None
        return self.get_by_id(user_id)

    def delete(self, user_id: UUID) -> int:
        """Remove a user and their posts in one transaction.

        Returns the number of posts removed.
        """
        with self._engine.begin() as conn:
            removed = conn.execute(delete(posts).where(posts.c.owner_id == user_id))
            conn.execute(delete(users).where(users.c.id == user_id))
        return removed.rowcount
