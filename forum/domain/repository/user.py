"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.user import User
from forum.domain.value import DisplayName, Handle, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up; unknown IDs are skipped

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their login handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_display_name(self, display_name: DisplayName) -> Optional[User]:
        """Find a user by their display name.

        Args:
            display_name: The display name to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Points are not written by ``save`` on update; use ``add_points``.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a user was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def add_points(self, user_id: UserId, delta: int) -> Optional[int]:
        """Atomically apply ``points = max(0, points + delta)``.

        Args:
            user_id: The user's unique identifier
            delta: Signed point delta

        Returns:
            The new point total, or None if the user does not exist
        """
        pass
