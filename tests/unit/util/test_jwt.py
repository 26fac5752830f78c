"""Unit tests for JWT utilities and JWTService.authenticate."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt as pyjwt
import pytest

from forum.config import AuthSettings
from forum.domain.error import UnauthenticatedError
from forum.domain.service import JWTService
from forum.util.jwt import JWTError, TokenExpiredError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-with-at-least-32-bytes")


def _expired_token(user_id: str) -> str:
    payload = {
        "user_id": user_id,
        "handle": "alice_b",
        "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
    }
    return pyjwt.encode(payload, SETTINGS.jwt_secret, algorithm="HS256")


class TestTokens:
    """Tests for create_token / verify_token."""

    def test_round_trip(self):
        user_id = str(uuid4())

        payload = verify_token(create_token(user_id, "alice_b", SETTINGS), SETTINGS)

        assert payload.user_id == user_id
        assert payload.handle == "alice_b"

    def test_expired_token(self):
        with pytest.raises(TokenExpiredError):
            verify_token(_expired_token(str(uuid4())), SETTINGS)

    def test_tampered_token(self):
        token = create_token(str(uuid4()), "alice_b", SETTINGS)
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        with pytest.raises(JWTError):
            verify_token(tampered, SETTINGS)

    def test_wrong_secret(self):
        other = AuthSettings(jwt_secret="another-secret-with-at-least-32-bytes!")
        token = create_token(str(uuid4()), "alice_b", other)

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)


class TestAuthenticate:
    """Tests for JWTService.authenticate."""

    def test_valid_token(self):
        service = JWTService(SETTINGS)
        user_id = uuid4()

        assert service.authenticate(service.create_token(str(user_id), "alice_b")) == user_id

    def test_missing_token(self):
        with pytest.raises(UnauthenticatedError, match="Authentication required"):
            JWTService(SETTINGS).authenticate(None)

    def test_expired_token_message(self):
        with pytest.raises(UnauthenticatedError, match="expired"):
            JWTService(SETTINGS).authenticate(_expired_token(str(uuid4())))

    def test_garbage_token(self):
        with pytest.raises(UnauthenticatedError, match="Invalid authentication token"):
            JWTService(SETTINGS).authenticate("not-a-jwt")

    def test_non_uuid_subject(self):
        service = JWTService(SETTINGS)
        token = service.create_token("not-a-uuid", "alice_b")

        with pytest.raises(UnauthenticatedError):
            service.authenticate(token)
