"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from forum.domain.error import ValidationError

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(value: str, kind: str) -> UUID:
    """Parse an identifier string received from a caller.

    Args:
        value: Raw identifier string
        kind: Entity kind used in the error message (e.g. "post")

    Returns:
        Parsed UUID

    Raises:
        ValidationError: If the string is not a valid UUID
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(f"Malformed {kind} id: {value!r}")
