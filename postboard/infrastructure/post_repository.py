"""
Adapter: Post repository.

Implements the PostRepository port on top of SQLAlchemy Core.
Reads join the owner so each post carries its owner's nickname.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping

from postboard.domain.entities import Post
from postboard.domain.ports import PostRepository
from postboard.infrastructure.database import as_utc, posts, users

logger = logging.getLogger(__name__)

_POST_WITH_OWNER = select(posts, users.c.nickname.label("owner_nickname")).select_from(
    posts.outerjoin(users, posts.c.owner_id == users.c.id)
)


def _to_post(row: RowMapping) -> Post:
    return Post(
        id=row["id"],
        title=row["title"],
        body=row["body"],
        owner=row["owner_id"],
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
        owner_nickname=row["owner_nickname"],
    )


class SqlPostRepository(PostRepository):
    """Persists posts in the ``posts`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _fetch(self, query) -> list[Post]:
        with self._engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [_to_post(row) for row in rows]

    def list_recent(self) -> list[Post]:
        return self._fetch(_POST_WITH_OWNER.order_by(posts.c.created_at.desc()))

    def list_by_owner(self, owner_id: UUID) -> list[Post]:
        return self._fetch(
            _POST_WITH_OWNER.where(posts.c.owner_id == owner_id).order_by(
                posts.c.created_at.desc()
            )
        )

    def latest_by_owner(self, owner_id: UUID) -> Optional[Post]:
        found = self._fetch(
            _POST_WITH_OWNER.where(posts.c.owner_id == owner_id)
            .order_by(posts.c.created_at.desc())
            .limit(1)
        )
        return found[0] if found else None

    def get_by_id(self, post_id: UUID) -> Optional[Post]:
        found = self._fetch(_POST_WITH_OWNER.where(posts.c.id == post_id))
        return found[0] if found else None

    def add(self, post: Post) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                insert(posts).values(
                    id=post.id,
                    title=post.title,
                    body=post.body,
                    owner_id=post.owner,
                    created_at=post.created_at,
                    updated_at=post.updated_at,
                )
            )
        logger.debug("Saved post=%s", post.id)

    def update(self, post_id: UUID, changes: dict[str, Any]) -> Optional[Post]:
        values = dict(changes, updated_at=datetime.now(timezone.utc))
        with self._engine.begin() as conn:
            conn.execute(update(posts).where(posts.c.id == post_id).values(**values))
        return self.get_by_id(post_id)

    def delete(self, post_id: UUID) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(posts).where(posts.c.id == post_id))
