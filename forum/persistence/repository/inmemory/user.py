"""In-memory user repository for testing."""

from typing import Optional, Sequence

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import DisplayName, Handle, UserId, clamp_points


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def find_by_display_name(self, display_name: DisplayName) -> Optional[User]:
        """Find a user by their display name."""
        for user in self._users.values():
            if user.display_name == display_name:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user, keeping the stored point total on update."""
        existing = self._users.get(user.id)
        if existing:
            user = user.model_copy(update={"points": existing.points})
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None

    async def add_points(self, user_id: UserId, delta: int) -> Optional[int]:
        """Apply a clamped point delta in one step."""
        user = self._users.get(user_id)
        if not user:
            return None
        points = clamp_points(user.points, delta)
        self._users[user_id] = user.model_copy(update={"points": points})
        return points
