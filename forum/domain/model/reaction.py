"""Reaction entity and reaction set value object.

A reaction records that a user likes or dislikes a post or comment.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ReactableType, ReactionKind, UserId
from forum.domain.value.common import ValueObject


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - One reaction per user per reactable (enforced by a unique constraint),
      which keeps likes and dislikes mutually exclusive
    - Polymorphic reference to the reactable (post or comment)
    """

    user_id: UserId
    reactable_type: ReactableType
    reactable_id: UUID  # PostId or CommentId
    kind: ReactionKind
    created_at: datetime = Field(default_factory=datetime.now)


class ReactionSets(ValueObject):
    """The likedBy / dislikedBy sets of one reactable."""

    liked_by: frozenset[UserId] = frozenset()
    disliked_by: frozenset[UserId] = frozenset()

    @property
    def like_count(self) -> int:
        return len(self.liked_by)

    @property
    def dislike_count(self) -> int:
        return len(self.disliked_by)
