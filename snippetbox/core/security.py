"""
Password hashing.

Passwords are hashed with bcrypt at a fixed, process-wide cost.
"""

import bcrypt

# Work factor used for every new hash.
BCRYPT_COST = 12

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def get_password_hash(password: str) -> str:
    """
    Hash a plaintext password.

    Raises:
        ValueError: If the password is empty or longer than 72 bytes
    """
    secret = password.encode("utf-8")
    if not secret:
        raise ValueError("Password must not be empty")
    if len(secret) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=BCRYPT_COST)).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Returns ``False`` on mismatch. A malformed stored hash raises
    :class:`ValueError` from bcrypt.
    """
    secret = plain_password.encode("utf-8")
    if len(secret) > MAX_PASSWORD_BYTES:
        # Never hashed, so it cannot match.
        return False
    return bcrypt.checkpw(secret, hashed_password.encode("ascii"))
