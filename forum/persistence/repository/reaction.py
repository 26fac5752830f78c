"""PostgreSQL implementation of Reaction repository."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Reaction, ReactionSets
from forum.domain.repository import ReactionRepository
from forum.domain.value import ReactableType, ReactionKind, UserId
from forum.persistence.mappers import reaction_to_dict, row_to_reaction
from forum.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, user_id: UserId, reactable_type: ReactableType, reactable_id: UUID
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific item."""
        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.user_id == user_id,
                reactions_table.c.reactable_type == reactable_type.value,
                reactions_table.c.reactable_id == reactable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_reaction(dict(row)) if row else None

    async def find_sets(
        self, reactable_type: ReactableType, reactable_id: UUID
    ) -> ReactionSets:
        """Load the liked_by / disliked_by sets of an item."""
        sets = await self.find_sets_for_many(reactable_type, [reactable_id])
        return sets[reactable_id]

    async def find_sets_for_many(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> dict[UUID, ReactionSets]:
        """Load reaction sets for several items (batch query)."""
        if not reactable_ids:
            return {}

        stmt = select(
            reactions_table.c.reactable_id,
            reactions_table.c.user_id,
            reactions_table.c.kind,
        ).where(
            and_(
                reactions_table.c.reactable_type == reactable_type.value,
                reactions_table.c.reactable_id.in_(reactable_ids),
            )
        )
        result = await self.session.execute(stmt)

        liked: dict[UUID, set[UserId]] = {rid: set() for rid in reactable_ids}
        disliked: dict[UUID, set[UserId]] = {rid: set() for rid in reactable_ids}
        for row in result.fetchall():
            target = liked if row.kind == ReactionKind.LIKE.value else disliked
            target[row.reactable_id].add(UserId(row.user_id))

        return {
            rid: ReactionSets(
                liked_by=frozenset(liked[rid]), disliked_by=frozenset(disliked[rid])
            )
            for rid in reactable_ids
        }

    async def add(self, reaction: Reaction) -> bool:
        """Insert a reaction unless the user already reacted to the item.

        ``INSERT ... ON CONFLICT DO NOTHING``; a returned row means the insert
        happened.
        """
        stmt = (
            insert(reactions_table)
            .values(**reaction_to_dict(reaction))
            .on_conflict_do_nothing(constraint="uq_reactions_user_item")
            .returning(reactions_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted

    async def remove(
        self,
        user_id: UserId,
        reactable_type: ReactableType,
        reactable_id: UUID,
        kind: ReactionKind,
    ) -> bool:
        """Delete a user's reaction of the given kind (``DELETE ... RETURNING``)."""
        stmt = (
            delete(reactions_table)
            .where(
                and_(
                    reactions_table.c.user_id == user_id,
                    reactions_table.c.reactable_type == reactable_type.value,
                    reactions_table.c.reactable_id == reactable_id,
                    reactions_table.c.kind == kind.value,
                )
            )
            .returning(reactions_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed

    async def delete_for(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> int:
        """Delete every reaction on the given items."""
        if not reactable_ids:
            return 0
        stmt = delete(reactions_table).where(
            and_(
                reactions_table.c.reactable_type == reactable_type.value,
                reactions_table.c.reactable_id.in_(reactable_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
