"""Delete account use case."""

import logfire
from pydantic import BaseModel

from forum.domain.service import AuthService, UserService
from forum.domain.value import UserId, parse_uuid


class DeleteAccountRequest(BaseModel):
    """Delete account request. The password is asked again as confirmation."""

    user_id: str
    password: str


class DeleteAccountResponse(BaseModel):
    """Delete account response."""

    success: bool
    message: str


class DeleteAccountUseCase:
    """Use case for deleting the caller's account.

    Posts, comments and reactions by the user are left in place; their
    author references simply stop resolving.
    """

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        """Initialize delete account use case.

        Args:
            user_service: User domain service
            auth_service: Authentication domain service
        """
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: DeleteAccountRequest) -> DeleteAccountResponse:
        """Execute delete account flow.

        Raises:
            InvalidCredentialsError: If the password does not match
            NotFoundError: If the user does not exist
        """
        user_id = UserId(parse_uuid(request.user_id, "user"))
        user = await self.user_service.get_by_id(user_id)

        self.auth_service.check_password(user, request.password)
        await self.user_service.delete(user_id)

        logfire.info("Account deleted", user_id=request.user_id)
        return DeleteAccountResponse(success=True, message="Account deleted")
