"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    handle: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


class TokenExpiredError(JWTError):
    """The token's ``exp`` claim is in the past."""

    pass


def create_token(user_id: str, handle: str, settings: AuthSettings) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        handle: Login handle
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "handle": handle,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        TokenExpiredError: If the token has expired
        JWTError: If the token is otherwise invalid
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Signature is fine but the claims don't match TokenPayload
        raise JWTError("Invalid token payload")
