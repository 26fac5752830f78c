"""Unit tests for signup, login and current-user use cases."""

import pytest

from forum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from forum.domain.error import UnauthenticatedError, ValidationError
from forum.domain.service import JWTService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _signup_request(**overrides) -> SignupRequest:
    data = {
        "handle": "alice_b",
        "display_name": "Alice",
        "password": "correct horse",
    }
    data.update(overrides)
    return SignupRequest(**data)


class TestSignupUseCase:
    """Tests for SignupUseCase."""

    @pytest.mark.asyncio
    async def test_signup_returns_token_for_new_user(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SignupUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(_signup_request())

        # Assert
        assert response.user.handle == "alice_b"
        assert response.user.points == 0
        assert response.user.rank == "rabbit"
        assert str(jwt_service.authenticate(response.token)) == response.user.user_id

    @pytest.mark.asyncio
    async def test_bad_handle_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SignupUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="Invalid handle"):
            await use_case.execute(_signup_request(handle="a b"))


class TestLoginUseCase:
    """Tests for LoginUseCase and GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_login_then_current_user(self, unit_env):
        # Arrange
        await (await unit_env.get(SignupUseCase)).execute(_signup_request())

        # Act
        login = await (await unit_env.get(LoginUseCase)).execute(
            LoginRequest(handle="alice_b", password="correct horse")
        )
        me = await (await unit_env.get(GetCurrentUserUseCase)).execute(
            GetCurrentUserRequest(token=login.token)
        )

        # Assert
        assert me.user_id == login.user.user_id
        assert me.display_name == "Alice"

    @pytest.mark.asyncio
    async def test_current_user_without_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(GetCurrentUserRequest(token=None))
