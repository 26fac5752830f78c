"""Check display name availability use case."""

from pydantic import BaseModel

from forum.application.usecase.common import parse_value
from forum.domain.service import UserService
from forum.domain.value import DisplayName


class CheckDisplayNameRequest(BaseModel):
    """Check display name request."""

    display_name: str


class CheckDisplayNameResponse(BaseModel):
    """Check display name response."""

    display_name: str
    available: bool


class CheckDisplayNameUseCase:
    """Use case for checking whether a display name is free (used at signup)."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(
        self, request: CheckDisplayNameRequest
    ) -> CheckDisplayNameResponse:
        """Execute check display name flow.

        Raises:
            ValidationError: If the display name is malformed
        """
        display_name = parse_value(DisplayName, request.display_name, "display name")
        available = await self.user_service.is_display_name_available(display_name)
        return CheckDisplayNameResponse(
            display_name=display_name.root, available=available
        )
