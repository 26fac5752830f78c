"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, author_id: UserId, body: str
    ) -> Comment:
        """Create and persist a comment on a post.

        Args:
            post_id: Parent post ID
            author_id: Author's user ID
            body: Comment text

        Returns:
            Saved comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                body=body,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_comment_on_post(
        self, post_id: PostId, comment_id: CommentId
    ) -> Comment:
        """Get a comment that must belong to ``post_id``.

        Raises:
            NotFoundError: If the comment is missing or sits on another post
        """
        comment = await self.get_comment(comment_id)
        if comment.post_id != post_id:
            logfire.warn(
                "Comment does not belong to post",
                comment_id=str(comment_id),
                post_id=str(post_id),
            )
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_for_post(
        self, post_id: PostId, limit: int, offset: int
    ) -> tuple[list[Comment], int]:
        """Get one page of a post's comments, newest first, plus the total."""
        with logfire.span(
            "comment_service.list_for_post",
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_by_post(
                post_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_by_post(post_id)
            return comments, total

    async def update_body(self, comment: Comment, body: str) -> Comment:
        """Replace a comment's text.

        Returns:
            Saved comment
        """
        with logfire.span("comment_service.update_body", comment_id=str(comment.id)):
            updated = Comment.model_validate(
                {**comment.model_dump(), "body": body, "updated_at": datetime.now()}
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(saved.id))
            return saved

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment row.

        Returns:
            True if a comment was deleted
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id), deleted=deleted)
            return deleted

    async def get_ids_for_post(self, post_id: PostId) -> list[CommentId]:
        """IDs of every comment on a post."""
        return await self.comment_repository.find_ids_by_post(post_id)

    async def delete_for_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Returns:
            Number of comments deleted
        """
        with logfire.span("comment_service.delete_for_post", post_id=str(post_id)):
            count = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Comments deleted with post", post_id=str(post_id), count=count)
            return count
