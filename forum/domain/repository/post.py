"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.post import Post
from forum.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(self, limit: int = 10, offset: int = 0) -> list[Post]:
        """Find posts, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post's unique identifier

        Returns:
            True if a post was deleted, False if none existed
        """
        pass
