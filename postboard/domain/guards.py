"""
Guard functions for ownership and identity checks.

Each guard either returns normally or raises a DomainError.
Guards are pure: they read their arguments and nothing else.

Identities and resources may be entities (attribute access) or
plain mappings (key access).
"""

from collections.abc import Mapping
from typing import Any, Optional, TypeVar
from uuid import UUID

from postboard.domain.errors import (
    DocumentNotFoundError,
    OwnershipError,
    UserValidationError,
)

T = TypeVar("T")


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def canonical_id(value: Any) -> Optional[str]:
    """Return the canonical string form of an identifier.

    UUID-shaped values (UUID objects, hyphenated or bare hex strings)
    collapse to the lowercase hyphenated form. Other values use str().
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return str(value)
    try:
        return str(UUID(str(value)))
    except ValueError:
        return str(value)


def same_id(left: Any, right: Any) -> bool:
    """Identifier-level equality. ``None`` never matches."""
    left_id = canonical_id(left)
    if left_id is None:
        return False
    return left_id == canonical_id(right)


def require_ownership(identity: Any, resource: Any) -> None:
    """Raise OwnershipError unless ``identity`` owns ``resource``.

    Args:
        identity: The authenticated caller (exposes ``id``).
        resource: A loaded document (exposes ``owner``).

    Raises:
        OwnershipError: If the caller's id differs from the resource owner.
    """
    if not same_id(_field(identity, "id"), _field(resource, "owner")):
        raise OwnershipError()


def validate_user(identity: Any, resource: Any) -> None:
    """Raise UserValidationError unless ``resource`` is the caller's own record.

    Only meant for user records: compares against the resource's own
    ``id``, not an ``owner`` field.
    """
    if not same_id(_field(identity, "id"), _field(resource, "id")):
        raise UserValidationError()


def handle_404(record: Optional[T]) -> T:
    """Return ``record`` unchanged, or raise DocumentNotFoundError if absent."""
    if record is None:
        raise DocumentNotFoundError()
    return record
