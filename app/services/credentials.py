"""Password hashing and access token issuance."""

import secrets

import bcrypt

from app.config import settings
from app.utils.exceptions import ValidationError

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def check_password_policy(password: str) -> None:
    """Reject passwords shorter than ``settings.min_password_length``."""
    if len(password) < settings.min_password_length:
        raise ValidationError(
            f"Password must be at least {settings.min_password_length} characters long"
        )


def _encode(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash ``password`` with a fresh bcrypt salt; the salt is embedded in the result."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_encode(password), password_hash.encode())


def issue_token() -> str:
    """Return a new random hex bearer token. Tokens never expire or rotate."""
    return secrets.token_hex(settings.access_token_bytes)
