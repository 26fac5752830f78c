"""Shared comment response model."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.common import AuthorSummary, ReactionSummary
from forum.domain.model import Comment, ReactionSets, User


class CommentView(BaseModel):
    """A comment with its author and reactions."""

    comment_id: str
    post_id: str
    body: str
    author: AuthorSummary | None
    reactions: ReactionSummary
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls, comment: Comment, author: User | None, sets: ReactionSets
    ) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            body=comment.body,
            author=AuthorSummary.from_user(author) if author else None,
            reactions=ReactionSummary.from_sets(sets),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
