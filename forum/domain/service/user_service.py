"""User domain service."""

from collections.abc import Sequence
from datetime import datetime

import logfire

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import DisplayName, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch-load users, keyed by ID. Missing users are simply absent."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}

    async def is_display_name_available(self, display_name: DisplayName) -> bool:
        """Check whether no user currently holds ``display_name``."""
        with logfire.span(
            "user_service.is_display_name_available", display_name=display_name.root
        ):
            existing = await self.user_repository.find_by_display_name(display_name)
            return existing is None

    async def update_display_name(
        self, user_id: UserId, display_name: DisplayName
    ) -> User:
        """Change a user's display name.

        Args:
            user_id: User ID
            display_name: New display name

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ConflictError: If another user holds the display name
        """
        with logfire.span(
            "user_service.update_display_name",
            user_id=str(user_id),
            display_name=display_name.root,
        ):
            user = await self.get_by_id(user_id)
            if user.display_name == display_name:
                return user

            holder = await self.user_repository.find_by_display_name(display_name)
            if holder and holder.id != user_id:
                logfire.warn(
                    "Display name already taken", display_name=display_name.root
                )
                raise ConflictError("display_name", display_name.root)

            updated = user.model_copy(
                update={"display_name": display_name, "updated_at": datetime.now()}
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Display name updated", user_id=str(user_id))
            return saved

    async def delete(self, user_id: UserId) -> None:
        """Delete a user account. Authored content is left in place.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            if not deleted:
                raise NotFoundError("User", str(user_id))
            logfire.info("User deleted", user_id=str(user_id))

    async def add_points(self, user_id: UserId, delta: int) -> int:
        """Atomically apply a point delta, clamped at zero.

        Args:
            user_id: User ID
            delta: Signed point change

        Returns:
            The user's new point total

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.add_points", user_id=str(user_id), delta=delta
        ):
            points = await self.user_repository.add_points(user_id, delta)
            if points is None:
                logfire.warn("Points applied to missing user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("Points applied", user_id=str(user_id), delta=delta, points=points)
            return points
