"""Password hashing with bcrypt."""

from __future__ import annotations

from typing import Optional

import bcrypt

BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes and refuses longer input
MAX_PASSWORD_BYTES = 72


def check_password_length(password: str) -> str:
    """Reject passwords bcrypt cannot hash; used as a pydantic validator."""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash ``password`` with a fresh salt.

    Raises:
        ValueError: The password is longer than ``MAX_PASSWORD_BYTES`` in UTF-8.
    """
    check_password_length(password)
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    """Check ``password`` against a stored hash. Accounts without a hash never verify."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash in the database
        return False
