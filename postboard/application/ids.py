"""Identifier parsing shared by use cases."""

from typing import Optional
from uuid import UUID


def parse_id(raw: str) -> Optional[UUID]:
    """Parse a client-supplied document id.

    Returns None for malformed ids: a string that is not a UUID cannot
    match any stored document.
    """
    try:
        return UUID(str(raw))
    except ValueError:
        return None
