"""
Security utilities for stored credentials.
Handles password hashing for user accounts.
"""
from functools import lru_cache

from passlib.context import CryptContext

from foodconnect.core.config import get_settings


@lru_cache()
def get_pwd_context() -> CryptContext:
    """Password hashing context, built once from settings."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return get_pwd_context().verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt."""
    return get_pwd_context().hash(password)
