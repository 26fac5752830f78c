"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId
from forum.persistence.mappers import comment_to_dict, row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find a post's comments newest first with pagination."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at.desc(), comments_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_ids_by_post(self, post_id: PostId) -> list[CommentId]:
        """Find the IDs of every comment on a post."""
        stmt = select(comments_table.c.id).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return [CommentId(comment_id) for comment_id in result.scalars().all()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count the comments on a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment row."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
