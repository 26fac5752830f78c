"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find comments on a post, newest first.

        Args:
            post_id: The post's ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_ids_by_post(self, post_id: PostId) -> list[CommentId]:
        """Find the IDs of every comment on a post.

        Args:
            post_id: The post's ID

        Returns:
            List of comment IDs
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post's ID

        Returns:
            Number of comments deleted
        """
        pass
