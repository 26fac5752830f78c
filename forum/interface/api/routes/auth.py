"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from forum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
)
from forum.application.usecase.common import UserProfile
from forum.config import AuthSettings
from forum.domain.error import NotFoundError, UnauthenticatedError
from forum.interface.api.auth import ACCESS_TOKEN_COOKIE, get_access_token

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: UserProfile | None = None


def _set_access_cookie(response: Response, token: str, settings: AuthSettings) -> None:
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupRequest,
    response: Response,
    signup_use_case: FromDishka[SignupUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SignupResponse:
    """Create an account and log it in.

    Args:
        request: Handle, display name and password
        response: FastAPI response object, receives the auth cookie
        signup_use_case: Signup use case from DI
        auth_settings: Auth settings from DI

    Returns:
        Token and the new user's profile

    Example:
        POST /auth/signup
        {"handle": "alice_b", "display_name": "Alice", "password": "s3cret-pass"}
    """
    result = await signup_use_case.execute(request)
    _set_access_cookie(response, result.token, auth_settings)
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> LoginResponse:
    """Log in with handle and password.

    The token is returned in the body for Bearer use and also set as an
    HTTP-only cookie.

    Args:
        request: Handle and password
        response: FastAPI response object, receives the auth cookie
        login_use_case: Login use case from DI
        auth_settings: Auth settings from DI

    Returns:
        Token and the user's profile
    """
    result = await login_use_case.execute(request)
    _set_access_cookie(response, result.token, auth_settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    response.delete_cookie(key=ACCESS_TOKEN_COOKIE, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_access_token),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error.
    """
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except (UnauthenticatedError, NotFoundError):
        return AuthStatusResponse(authenticated=False)

    return AuthStatusResponse(authenticated=True, user=user)
