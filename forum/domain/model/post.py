"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Like/dislike membership is stored as reactions and read through
    ``ReactionRepository.find_sets``, not on the post itself.
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1, max_length=10000)
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
