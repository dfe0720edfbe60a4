"""Password hashing (bcrypt via passlib).

The work factor is fixed so that every stored hash costs the same to verify.
"""
from __future__ import annotations

from passlib.context import CryptContext

BCRYPT_ROUNDS = 10

_pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    return _pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return _pwd_context.verify(plain_password, hashed_password)
