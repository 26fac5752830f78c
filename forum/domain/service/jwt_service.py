"""JWT token domain service."""

from uuid import UUID

import logfire

from forum.config import AuthSettings
from forum.domain.error import UnauthenticatedError
from forum.domain.value import UserId
from forum.util.jwt import (
    JWTError,
    TokenExpiredError,
    TokenPayload,
    create_token,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, handle: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            handle: Login handle

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, handle=handle):
            token = create_token(user_id, handle, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, handle=handle)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified", user_id=payload.user_id, handle=payload.handle
                )
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def authenticate(self, token: str | None) -> UserId:
        """Resolve the caller's user ID from a credential.

        Args:
            token: JWT token string, or None when the request carried none

        Returns:
            Authenticated user ID

        Raises:
            UnauthenticatedError: If the token is missing, expired or invalid
        """
        if not token:
            raise UnauthenticatedError("Authentication required")

        try:
            payload = self.verify_token(token)
        except TokenExpiredError:
            raise UnauthenticatedError("Session expired, please log in again")
        except JWTError:
            raise UnauthenticatedError("Invalid authentication token")

        try:
            return UserId(UUID(payload.user_id))
        except ValueError:
            raise UnauthenticatedError("Invalid authentication token")
