"""Update profile use case."""

from pydantic import BaseModel

from forum.application.usecase.common import UserProfile, parse_value
from forum.domain.service import UserService
from forum.domain.value import DisplayName, UserId, parse_uuid


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str
    display_name: str


class UpdateProfileUseCase:
    """Use case for changing the caller's display name."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UserProfile:
        """Execute update profile flow.

        Raises:
            ValidationError: If the display name is malformed
            ConflictError: If another user holds the display name
            NotFoundError: If the user does not exist
        """
        user_id = UserId(parse_uuid(request.user_id, "user"))
        display_name = parse_value(DisplayName, request.display_name, "display name")

        user = await self.user_service.update_display_name(user_id, display_name)
        return UserProfile.from_user(user)
