"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .reaction import InMemoryReactionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryReactionRepository",
    "InMemoryUserRepository",
]
