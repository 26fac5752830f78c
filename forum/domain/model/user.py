"""User aggregate root.

Users sign up with a handle and password and accumulate points when their
posts and comments are created and reacted to.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import DisplayName, Handle, Rank, UserId


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - handle and display_name are each unique across users
    - points never drop below zero
    """

    id: UserId
    handle: Handle
    display_name: DisplayName
    password_hash: str
    points: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def rank(self) -> Rank:
        """Cosmetic rank for the current point total."""
        return Rank.for_points(self.points)
