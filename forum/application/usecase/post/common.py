"""Shared post response model and image payload."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.common import AuthorSummary, ReactionSummary
from forum.domain.model import Post, ReactionSets, User


class ImageUpload(BaseModel):
    """An image file received with a post form."""

    content: bytes
    content_type: str | None = None
    filename: str | None = None


class PostView(BaseModel):
    """A post with its author and reactions.

    ``author`` is None once the author's account has been deleted.
    """

    post_id: str
    title: str
    body: str
    image_url: str | None
    author: AuthorSummary | None
    reactions: ReactionSummary
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls, post: Post, author: User | None, sets: ReactionSets
    ) -> "PostView":
        return cls(
            post_id=str(post.id),
            title=post.title,
            body=post.body,
            image_url=post.image_url,
            author=AuthorSummary.from_user(author) if author else None,
            reactions=ReactionSummary.from_sets(sets),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
