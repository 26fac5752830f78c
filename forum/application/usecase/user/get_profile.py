"""Get profile use case."""

from pydantic import BaseModel

from forum.application.usecase.common import UserProfile
from forum.domain.service import UserService
from forum.domain.value import UserId, parse_uuid


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str


class GetProfileUseCase:
    """Use case for reading an account's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> UserProfile:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(parse_uuid(request.user_id, "user"))
        user = await self.user_service.get_by_id(user_id)
        return UserProfile.from_user(user)
