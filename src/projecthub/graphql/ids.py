"""
Helpers for translating GraphQL ``ID`` values to and from database keys
"""

from uuid import UUID

import strawberry


def parse_id(value: str | UUID | None) -> UUID | None:
    """Parse a GraphQL ID into a UUID, returning None when it cannot name a record."""
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def to_global_id(value: UUID) -> strawberry.ID:
    return strawberry.ID(str(value))
