"""
Security utilities.

Password hashing, session token generation and the bearer-token scheme.

New passwords are hashed with PBKDF2-SHA256 through passlib.  Hashes in the
legacy ``salt:hexhash`` format (a salted 32-bit string hash) still verify so
that imported accounts can sign in; callers should rehash them on success
(see :func:`needs_rehash`).
"""

import hmac
import secrets

from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto",
                           pbkdf2_sha256__default_rounds=settings.PASSWORD_HASH_ROUNDS, )

# auto_error=False: a missing token means "anonymous", not 401
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


# ======================================================================
# Legacy hash
# ======================================================================


def legacy_string_hash(value: str) -> str:
    """32-bit rolling string hash (``h = h*31 + c``) over UTF-16 code units.

    Returns the absolute value of the signed 32-bit result as lowercase hex.
    """
    data = value.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        h = (h * 31 + int.from_bytes(data[i:i + 2], "little")) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return format(abs(h), "x")


def is_legacy_hash(password_hash: str) -> bool:
    return not password_hash.startswith("$") and ":" in password_hash


def _verify_legacy(password: str, password_hash: str) -> bool:
    salt, _, stored = password_hash.partition(":")
    if not salt or not stored:
        return False
    return hmac.compare_digest(legacy_string_hash(password + salt), stored)


# ======================================================================
# Public API
# ======================================================================


def get_password_hash(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a password against a stored hash (current or legacy format)."""
    if not password_hash:
        return False
    if is_legacy_hash(password_hash):
        return _verify_legacy(plain_password, password_hash)
    try:
        return pwd_context.verify(plain_password, password_hash)
    except ValueError:
        # Unrecognised hash format
        return False


def needs_rehash(password_hash: str) -> bool:
    return is_legacy_hash(password_hash) or pwd_context.needs_update(password_hash)


def generate_session_token() -> str:
    """Random URL-safe session token."""
    return secrets.token_urlsafe(settings.SESSION_TOKEN_BYTES)
