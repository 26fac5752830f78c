"""Get current user use case."""

from pydantic import BaseModel

from forum.application.usecase.common import UserProfile
from forum.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None


class GetCurrentUserUseCase:
    """Use case for resolving the caller's account from a token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserProfile:
        """Execute get current user flow.

        Args:
            request: Request carrying the raw token

        Returns:
            The caller's profile

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the token's user no longer exists
        """
        user_id = self.jwt_service.authenticate(request.token)
        user = await self.user_service.get_by_id(user_id)
        return UserProfile.from_user(user)
