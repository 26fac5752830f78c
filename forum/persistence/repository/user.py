"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import DisplayName, Handle, UserId
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query)."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle.

        Args:
            handle: Handle to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.handle == handle.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_display_name(self, display_name: DisplayName) -> Optional[User]:
        """Find a user by their display name."""
        stmt = select(users_table).where(
            users_table.c.display_name == display_name.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Updates never write ``points``; that column only moves through
        ``add_points``.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            user_dict.pop("points")
            user_dict.pop("created_at")
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return user.model_copy(update={"points": existing.points})

        stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user row."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_points(self, user_id: UserId, delta: int) -> Optional[int]:
        """Atomically add ``delta`` to a user's points, floored at zero.

        A single ``UPDATE ... RETURNING`` statement, so concurrent deltas
        never read a stale total.

        Args:
            user_id: User ID to update
            delta: Signed point change

        Returns:
            New point total, or None if the user does not exist
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(points=func.greatest(0, users_table.c.points + delta))
            .returning(users_table.c.points)
        )
        result = await self.session.execute(stmt)
        points = result.scalar_one_or_none()
        await self.session.flush()
        return points
