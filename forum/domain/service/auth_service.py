"""Authentication domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.config import AuthSettings
from forum.domain.error import ConflictError, InvalidCredentialsError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import DisplayName, Handle, UserId
from forum.util.password import hash_password, verify_password

from .base import Service


class AuthService(Service):
    """Domain service for password authentication.

    Accounts are identified by a handle and protected by a bcrypt hash.
    """

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def signup(
        self, handle: Handle, display_name: DisplayName, password: str
    ) -> User:
        """Register a new account with zero points.

        Args:
            handle: Requested login handle
            display_name: Requested public nickname
            password: Plain password

        Returns:
            Created user

        Raises:
            ConflictError: If the handle or display name is already taken
        """
        with logfire.span("auth_service.signup", handle=handle.root):
            if await self.user_repository.find_by_handle(handle):
                logfire.warn("Signup with taken handle", handle=handle.root)
                raise ConflictError("handle", handle.root)

            if await self.user_repository.find_by_display_name(display_name):
                logfire.warn(
                    "Signup with taken display name", display_name=display_name.root
                )
                raise ConflictError("display_name", display_name.root)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                handle=handle,
                display_name=display_name,
                password_hash=hash_password(
                    password, rounds=self.auth_settings.bcrypt_rounds
                ),
                points=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User signed up", user_id=str(saved.id), handle=handle.root)
            return saved

    async def login(self, handle: str, password: str) -> User:
        """Check a handle/password pair.

        The same error is raised for an unknown handle and a wrong password.

        Args:
            handle: Login handle as typed
            password: Plain password

        Returns:
            Authenticated user

        Raises:
            InvalidCredentialsError: If the pair does not match an account
        """
        with logfire.span("auth_service.login", handle=handle):
            try:
                parsed = Handle(handle)
            except ValueError:
                logfire.warn("Login with malformed handle", handle=handle)
                raise InvalidCredentialsError()

            user = await self.user_repository.find_by_handle(parsed)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Login failed", handle=handle)
                raise InvalidCredentialsError()

            logfire.info("User logged in", user_id=str(user.id), handle=handle)
            return user

    def check_password(self, user: User, password: str) -> None:
        """Confirm a password for a sensitive operation on ``user``.

        Raises:
            InvalidCredentialsError: If the password does not match
        """
        if not verify_password(password, user.password_hash):
            logfire.warn("Password confirmation failed", user_id=str(user.id))
            raise InvalidCredentialsError()
