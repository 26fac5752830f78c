"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find a post's comments newest first."""
        on_post = [c for c in self._comments.values() if c.post_id == post_id]
        ordered = sorted(
            reversed(on_post), key=lambda comment: comment.created_at, reverse=True
        )
        return ordered[offset : offset + limit]

    async def find_ids_by_post(self, post_id: PostId) -> list[CommentId]:
        """Find the IDs of every comment on a post."""
        return [c.id for c in self._comments.values() if c.post_id == post_id]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count the comments on a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
