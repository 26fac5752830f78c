"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response
from pydantic import BaseModel

from forum.application.usecase.common import UserProfile
from forum.application.usecase.user import (
    CheckDisplayNameRequest,
    CheckDisplayNameResponse,
    CheckDisplayNameUseCase,
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.auth import ACCESS_TOKEN_COOKIE, get_access_token

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current user's profile."""

    display_name: str


class DeleteAccountAPIRequest(BaseModel):
    """API request for deleting the current user's account."""

    password: str


@router.get("/display-name-availability", response_model=CheckDisplayNameResponse)
async def check_display_name(
    check_display_name_use_case: FromDishka[CheckDisplayNameUseCase],
    display_name: str = Query(min_length=1),
) -> CheckDisplayNameResponse:
    """Check whether a display name is free to take.

    Example:
        GET /users/display-name-availability?display_name=Alice

        Response:
        {"display_name": "Alice", "available": false}
    """
    return await check_display_name_use_case.execute(
        CheckDisplayNameRequest(display_name=display_name)
    )


@router.get("/me", response_model=UserProfile)
async def get_my_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> UserProfile:
    """Get the current user's profile, including points and rank."""
    user_id = jwt_service.authenticate(token)
    return await get_profile_use_case.execute(GetProfileRequest(user_id=str(user_id)))


@router.patch("/me", response_model=UserProfile)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> UserProfile:
    """Change the current user's display name.

    Raises:
        ConflictError: If the display name is taken (409)
    """
    user_id = jwt_service.authenticate(token)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(user_id=str(user_id), display_name=request.display_name)
    )


@router.delete("/me", response_model=DeleteAccountResponse)
async def delete_my_account(
    request: DeleteAccountAPIRequest,
    response: Response,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> DeleteAccountResponse:
    """Delete the current user's account after re-checking the password.

    Posts and comments stay in place; they show no author afterwards.
    """
    user_id = jwt_service.authenticate(token)
    result = await delete_account_use_case.execute(
        DeleteAccountRequest(user_id=str(user_id), password=request.password)
    )
    response.delete_cookie(key=ACCESS_TOKEN_COOKIE, path="/")
    return result
