"""Request credential extraction."""

from fastapi import Request

ACCESS_TOKEN_COOKIE = "access_token"


def get_access_token(request: Request) -> str | None:
    """Read the caller's JWT from the request.

    ``Authorization: Bearer <jwt>`` wins over the ``access_token`` cookie.

    Args:
        request: Incoming request

    Returns:
        Raw token, or None if the request carries no credential
    """
    authorization = request.headers.get("Authorization")
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()

    return request.cookies.get(ACCESS_TOKEN_COOKIE)
