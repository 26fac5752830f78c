"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class ReactableType(str, Enum):
    """Type of entity that can be liked or disliked."""

    POST = "post"
    COMMENT = "comment"


class ReactionKind(str, Enum):
    """Kind of reaction a user holds on an entity.

    A user holds at most one reaction per entity, so the two kinds are
    mutually exclusive.
    """

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def opposite(self) -> "ReactionKind":
        """The kind this one displaces when added."""
        return ReactionKind.DISLIKE if self is ReactionKind.LIKE else ReactionKind.LIKE


class Handle(RootValueObject[str]):
    """Login identifier chosen at signup.

    4-30 characters, letters, digits and underscores.
    Examples: 'alice', 'bob_1984'
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle format."""
        if not re.match(r"^[A-Za-z0-9_]{4,30}$", v):
            raise ValueError(
                "Handle must be 4-30 characters of letters, digits or underscores"
            )
        return v


class DisplayName(RootValueObject[str]):
    """Public nickname shown next to posts and comments."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 2 or len(v) > 20:
            raise ValueError("Display name must be 2-20 characters")
        return v
