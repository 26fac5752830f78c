"""Response fragments and input parsing shared by several use cases."""

from datetime import datetime
from typing import Callable, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from forum.domain.error import ValidationError
from forum.domain.model import ReactionSets, User
from forum.domain.value import Rank

V = TypeVar("V")


class AuthorSummary(BaseModel):
    """Public view of a post or comment author."""

    user_id: str
    display_name: str
    points: int
    rank: Rank

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            user_id=str(user.id),
            display_name=user.display_name.root,
            points=user.points,
            rank=user.rank,
        )


class ReactionSummary(BaseModel):
    """Who likes and dislikes an item. IDs are sorted for stable output."""

    likes: list[str]
    dislikes: list[str]
    like_count: int
    dislike_count: int

    @classmethod
    def from_sets(cls, sets: ReactionSets) -> "ReactionSummary":
        return cls(
            likes=sorted(str(user_id) for user_id in sets.liked_by),
            dislikes=sorted(str(user_id) for user_id in sets.disliked_by),
            like_count=sets.like_count,
            dislike_count=sets.dislike_count,
        )


def parse_value(value_type: Callable[[str], V], raw: str, field: str) -> V:
    """Build a value object from user input.

    Raises:
        ValidationError: If the input breaks the value object's rules
    """
    try:
        return value_type(raw)
    except PydanticValidationError as e:
        reason = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise ValidationError(f"Invalid {field}: {reason}")


class UserProfile(BaseModel):
    """A user's own account view."""

    user_id: str
    handle: str
    display_name: str
    points: int
    rank: Rank
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            user_id=str(user.id),
            handle=user.handle.root,
            display_name=user.display_name.root,
            points=user.points,
            rank=user.rank,
            created_at=user.created_at,
        )
