"""Reaction and reputation ledger.

Likes and dislikes on posts and comments move points to and from the
author of the reacted item. Every membership change goes through a single
atomic repository primitive, and a point delta is applied only when that
primitive reports that membership actually changed.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import logfire

from forum.domain.model import Reaction, ReactionSets
from forum.domain.repository import ReactionRepository
from forum.domain.value import (
    CommentId,
    PointSchedule,
    PostId,
    ReactableType,
    ReactionKind,
    UserId,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .user_service import UserService


@dataclass(frozen=True)
class ReactionResult:
    """Outcome of a ledger operation.

    Carries the item's reaction sets after the operation and the author's
    point total.
    """

    reactable_type: ReactableType
    reactable_id: UUID
    author_id: UserId
    author_points: int
    sets: ReactionSets

    @property
    def liked_by(self) -> frozenset[UserId]:
        return self.sets.liked_by

    @property
    def disliked_by(self) -> frozenset[UserId]:
        return self.sets.disliked_by


class ReactionService(Service):
    """Domain service for likes, dislikes and the point ledger.

    The four operations are explicit and idempotent: ``like`` on an item the
    user already likes changes nothing, and ``unlike`` on an item the user
    does not like changes nothing.
    """

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.reaction_repository = reaction_repository
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def like(
        self, reactable_type: ReactableType, reactable_id: UUID, user_id: UserId
    ) -> ReactionResult:
        """Like an item.

        A dislike held by the user is removed first (+1 to the author), then
        the like is added (+3). No-op if the user already likes the item.

        Args:
            reactable_type: Post or comment
            reactable_id: ID of the item
            user_id: Acting user

        Returns:
            Reaction sets and author points after the operation

        Raises:
            NotFoundError: If the item, its author or the acting user is missing
        """
        return await self._react(
            reactable_type, reactable_id, user_id, ReactionKind.LIKE
        )

    async def unlike(
        self, reactable_type: ReactableType, reactable_id: UUID, user_id: UserId
    ) -> ReactionResult:
        """Remove the user's like (-3, clamped). Dislikes are left alone.

        Raises:
            NotFoundError: If the item, its author or the acting user is missing
        """
        return await self._withdraw(
            reactable_type, reactable_id, user_id, ReactionKind.LIKE
        )

    async def dislike(
        self, reactable_type: ReactableType, reactable_id: UUID, user_id: UserId
    ) -> ReactionResult:
        """Dislike an item.

        A like held by the user is removed first (-3), then the dislike is
        added (-1). Each step is clamped at zero on its own.

        Raises:
            NotFoundError: If the item, its author or the acting user is missing
        """
        return await self._react(
            reactable_type, reactable_id, user_id, ReactionKind.DISLIKE
        )

    async def undislike(
        self, reactable_type: ReactableType, reactable_id: UUID, user_id: UserId
    ) -> ReactionResult:
        """Remove the user's dislike (+1). Likes are left alone.

        Raises:
            NotFoundError: If the item, its author or the acting user is missing
        """
        return await self._withdraw(
            reactable_type, reactable_id, user_id, ReactionKind.DISLIKE
        )

    async def award_creation(
        self, reactable_type: ReactableType, author_id: UserId
    ) -> int:
        """Credit the author for creating a post or comment.

        Returns:
            The author's new point total
        """
        with logfire.span(
            "reaction_service.award_creation",
            reactable_type=reactable_type.value,
            author_id=str(author_id),
        ):
            return await self.user_service.add_points(
                author_id, PointSchedule.for_creation(reactable_type)
            )

    async def reverse_creation(
        self, reactable_type: ReactableType, author_id: UserId
    ) -> int:
        """Take back the creation award when a post or comment is deleted.

        Points earned from reactions on the item stay with the author.

        Returns:
            The author's new point total
        """
        with logfire.span(
            "reaction_service.reverse_creation",
            reactable_type=reactable_type.value,
            author_id=str(author_id),
        ):
            return await self.user_service.add_points(
                author_id, PointSchedule.for_deletion(reactable_type)
            )

    async def get_reaction_sets(
        self, reactable_type: ReactableType, reactable_id: UUID
    ) -> ReactionSets:
        """Current liked_by / disliked_by sets of one item."""
        return await self.reaction_repository.find_sets(reactable_type, reactable_id)

    async def get_reaction_sets_for_many(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> dict[UUID, ReactionSets]:
        """Reaction sets for a page of items, in one query."""
        if not reactable_ids:
            return {}
        return await self.reaction_repository.find_sets_for_many(
            reactable_type, reactable_ids
        )

    async def clear_reactions(
        self, reactable_type: ReactableType, reactable_ids: Sequence[UUID]
    ) -> int:
        """Drop every reaction on the given items without touching points.

        Returns:
            Number of reactions deleted
        """
        if not reactable_ids:
            return 0
        with logfire.span(
            "reaction_service.clear_reactions",
            reactable_type=reactable_type.value,
            count=len(reactable_ids),
        ):
            deleted = await self.reaction_repository.delete_for(
                reactable_type, reactable_ids
            )
            logfire.info(
                "Reactions cleared",
                reactable_type=reactable_type.value,
                deleted=deleted,
            )
            return deleted

    async def _react(
        self,
        reactable_type: ReactableType,
        reactable_id: UUID,
        user_id: UserId,
        kind: ReactionKind,
    ) -> ReactionResult:
        with logfire.span(
            f"reaction_service.{kind.value}",
            reactable_type=reactable_type.value,
            reactable_id=str(reactable_id),
            user_id=str(user_id),
        ):
            author_id, author_points = await self._load_parties(
                reactable_type, reactable_id, user_id
            )

            # Switching sides: drop the opposite reaction first
            if await self.reaction_repository.remove(
                user_id, reactable_type, reactable_id, kind.opposite
            ):
                author_points = await self.user_service.add_points(
                    author_id, PointSchedule.for_removed(kind.opposite)
                )
                logfire.info(
                    "Opposite reaction removed",
                    removed=kind.opposite.value,
                    author_points=author_points,
                )

            added = await self.reaction_repository.add(
                Reaction(
                    user_id=user_id,
                    reactable_type=reactable_type,
                    reactable_id=reactable_id,
                    kind=kind,
                    created_at=datetime.now(),
                )
            )
            if added:
                author_points = await self.user_service.add_points(
                    author_id, PointSchedule.for_added(kind)
                )
                logfire.info(
                    "Reaction added", kind=kind.value, author_points=author_points
                )
            else:
                logfire.info("Reaction already present", kind=kind.value)

            return await self._result(
                reactable_type, reactable_id, author_id, author_points
            )

    async def _withdraw(
        self,
        reactable_type: ReactableType,
        reactable_id: UUID,
        user_id: UserId,
        kind: ReactionKind,
    ) -> ReactionResult:
        with logfire.span(
            f"reaction_service.un{kind.value}",
            reactable_type=reactable_type.value,
            reactable_id=str(reactable_id),
            user_id=str(user_id),
        ):
            author_id, author_points = await self._load_parties(
                reactable_type, reactable_id, user_id
            )

            if await self.reaction_repository.remove(
                user_id, reactable_type, reactable_id, kind
            ):
                author_points = await self.user_service.add_points(
                    author_id, PointSchedule.for_removed(kind)
                )
                logfire.info(
                    "Reaction removed", kind=kind.value, author_points=author_points
                )
            else:
                logfire.info("No reaction to remove", kind=kind.value)

            return await self._result(
                reactable_type, reactable_id, author_id, author_points
            )

    async def _load_parties(
        self, reactable_type: ReactableType, reactable_id: UUID, user_id: UserId
    ) -> tuple[UserId, int]:
        """Resolve the item's author and check both users exist.

        Returns:
            The author's ID and current point total
        """
        if reactable_type == ReactableType.POST:
            post = await self.post_service.get_post(PostId(reactable_id))
            author_id = post.author_id
        else:
            comment = await self.comment_service.get_comment(CommentId(reactable_id))
            author_id = comment.author_id

        await self.user_service.get_by_id(user_id)
        author = await self.user_service.get_by_id(author_id)
        return author_id, author.points

    async def _result(
        self,
        reactable_type: ReactableType,
        reactable_id: UUID,
        author_id: UserId,
        author_points: int,
    ) -> ReactionResult:
        sets = await self.reaction_repository.find_sets(reactable_type, reactable_id)
        return ReactionResult(
            reactable_type=reactable_type,
            reactable_id=reactable_id,
            author_id=author_id,
            author_points=author_points,
            sets=sets,
        )
