"""Comment entity."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post. Comments are flat (no replies)."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    body: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
