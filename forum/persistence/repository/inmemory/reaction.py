"""In-memory reaction repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from forum.domain.model.reaction import Reaction, ReactionSets
from forum.domain.repository.reaction import ReactionRepository
from forum.domain.value import ReactableType, ReactionKind, UserId

_Key = tuple[UserId, ReactableType, UUID]


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    Keyed by (user, type, item) so a user holds at most one reaction per
    item, mirroring the unique constraint of the real table.
    """

    def __init__(self) -> None:
        self._reactions: dict[_Key, Reaction] = {}

    async def find(
        self, user_id: UserId, reactable_type: ReactableType, reactable_id: UUID
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific item."""
        return self._reactions.get((user_id, reactable_type, reactable_id))

    async def find_sets(
        self, reactable_type: ReactableType, reactable_id: UUID
    ) -> ReactionSets:
        """Load the liked_by / disliked_by sets of an item."""
        liked: set[UserId] = set()
        disliked: set[UserId] = set()
        for (user_id, rtype, rid), reaction in self._reactions.items():
            if rtype != reactable_type or rid != reactable_id:
                continue
            if reaction.kind == ReactionKind.LIKE:
                liked.add(user_id)
            else:
                disliked.add(user_id)
        return ReactionSets(liked_by=frozenset(liked), disliked_by=frozenset(disliked))

    async def find_sets_for_many(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> dict[UUID, ReactionSets]:
        """Load reaction sets for several items."""
        return {
            rid: await self.find_sets(reactable_type, rid) for rid in reactable_ids
        }

    async def add(self, reaction: Reaction) -> bool:
        """Insert a reaction unless the user already reacted to the item."""
        key = (reaction.user_id, reaction.reactable_type, reaction.reactable_id)
        if key in self._reactions:
            return False
        self._reactions[key] = reaction
        return True

    async def remove(
        self,
        user_id: UserId,
        reactable_type: ReactableType,
        reactable_id: UUID,
        kind: ReactionKind,
    ) -> bool:
        """Delete a user's reaction of the given kind."""
        key = (user_id, reactable_type, reactable_id)
        existing = self._reactions.get(key)
        if not existing or existing.kind != kind:
            return False
        del self._reactions[key]
        return True

    async def delete_for(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> int:
        """Delete every reaction on the given items."""
        targets = set(reactable_ids)
        doomed = [
            key
            for key in self._reactions
            if key[1] == reactable_type and key[2] in targets
        ]
        for key in doomed:
            del self._reactions[key]
        return len(doomed)
