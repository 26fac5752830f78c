"""Login use case."""

from pydantic import BaseModel

from forum.application.usecase.common import UserProfile
from forum.domain.service import AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    handle: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: UserProfile


class LoginUseCase:
    """Use case for handle/password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the handle/password pair is wrong
        """
        user = await self.auth_service.login(request.handle, request.password)
        token = self.jwt_service.create_token(str(user.id), user.handle.root)
        return LoginResponse(token=token, user=UserProfile.from_user(user))
