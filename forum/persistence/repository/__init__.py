"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.reaction import PostgresReactionRepository
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReactionRepository",
]
