"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_page(self, limit: int = 10, offset: int = 0) -> list[Post]:
        """Find posts newest first with pagination."""
        stmt = (
            select(posts_table)
            .order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def count(self) -> int:
        """Count all posts."""
        stmt = select(func.count()).select_from(posts_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        existing = await self.find_by_id(post.id)

        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post row."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
