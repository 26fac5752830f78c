"""Signup use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import UserProfile, parse_value
from forum.domain.service import AuthService, JWTService
from forum.domain.value import DisplayName, Handle


class SignupRequest(BaseModel):
    """Signup request."""

    handle: str
    display_name: str
    password: str = Field(min_length=8, max_length=72)


class SignupResponse(BaseModel):
    """Signup response. New accounts are logged in straight away."""

    token: str
    user: UserProfile


class SignupUseCase:
    """Use case for registering a new account."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Args:
            request: Signup request

        Returns:
            Access token and the new profile

        Raises:
            ValidationError: If the handle or display name is malformed
            ConflictError: If the handle or display name is taken
        """
        handle = parse_value(Handle, request.handle, "handle")
        display_name = parse_value(DisplayName, request.display_name, "display name")

        user = await self.auth_service.signup(handle, display_name, request.password)
        token = self.jwt_service.create_token(str(user.id), user.handle.root)

        return SignupResponse(token=token, user=UserProfile.from_user(user))
