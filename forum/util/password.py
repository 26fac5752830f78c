"""Password hashing with bcrypt."""

import bcrypt

# bcrypt only looks at the first 72 bytes of the input
MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str, rounds: int = 12) -> str:
    """Hash a plain password.

    Args:
        plain_password: Password as typed by the user
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as a UTF-8 string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns False (rather than raising) for a malformed stored hash.
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), password_hash.encode("utf-8")
        )
    except ValueError:
        return False
