"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from forum.domain.model.reaction import Reaction, ReactionSets
from forum.domain.value import ReactableType, ReactionKind, UserId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    ``add`` and ``remove`` are the atomic add-to-set / remove-from-set
    primitives the ledger relies on: each is a single storage operation and
    reports whether membership actually changed.
    """

    @abstractmethod
    async def find(
        self, user_id: UserId, reactable_type: ReactableType, reactable_id: UUID
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific item.

        Args:
            user_id: The user's ID
            reactable_type: Type of item (post or comment)
            reactable_id: ID of the item

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_sets(
        self, reactable_type: ReactableType, reactable_id: UUID
    ) -> ReactionSets:
        """Load the liked_by / disliked_by sets of an item.

        Args:
            reactable_type: Type of item (post or comment)
            reactable_id: ID of the item

        Returns:
            Reaction sets (empty if nobody reacted)
        """
        pass

    @abstractmethod
    async def find_sets_for_many(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> dict[UUID, ReactionSets]:
        """Load reaction sets for several items (batch query).

        Args:
            reactable_type: Type of items (post or comment)
            reactable_ids: IDs of the items

        Returns:
            Mapping of every requested ID to its reaction sets
        """
        pass

    @abstractmethod
    async def add(self, reaction: Reaction) -> bool:
        """Insert a reaction unless the user already reacted to the item.

        Args:
            reaction: The reaction to insert

        Returns:
            True if inserted, False if the user already holds a reaction
            (of either kind) on the item
        """
        pass

    @abstractmethod
    async def remove(
        self,
        user_id: UserId,
        reactable_type: ReactableType,
        reactable_id: UUID,
        kind: ReactionKind,
    ) -> bool:
        """Delete a user's reaction of the given kind.

        Args:
            user_id: The user's ID
            reactable_type: Type of item (post or comment)
            reactable_id: ID of the item
            kind: Only a reaction of this kind is removed

        Returns:
            True if a reaction was removed, False if none matched
        """
        pass

    @abstractmethod
    async def delete_for(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> int:
        """Delete every reaction on the given items.

        Args:
            reactable_type: Type of items (post or comment)
            reactable_ids: IDs of the items

        Returns:
            Number of reactions deleted
        """
        pass
