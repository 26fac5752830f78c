"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.post import Post
from forum.domain.model.reaction import Reaction, ReactionSets
from forum.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reaction",
    "ReactionSets",
]
