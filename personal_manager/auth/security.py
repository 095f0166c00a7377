from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from personal_manager.config import settings


class AuthenticationError(Exception):
    """Raised for any credential problem; the message is safe to show to the caller."""
    pass


# ===== PASSWORD HASHING UTILITIES =====

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72
PASSWORD_TOO_LONG = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"


def password_too_long(password: str) -> bool:
    return len(password.encode('utf-8')) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """
    Hash a password with bcrypt at the configured work factor.

    Raises:
        ValueError: if the password is longer than MAX_PASSWORD_BYTES once encoded
    """
    if password_too_long(password):
        raise ValueError(PASSWORD_TOO_LONG)
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    if password_too_long(plain_password):
        return False
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


# ===== SESSION TOKENS =====

def issue_token(user_id: str, now: Optional[datetime] = None) -> str:
    """Create a signed session token for the given user id"""
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(hours=settings.token_ttl_hours)
    claims = {
        "sub": user_id,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> str:
    """
    Verify a session token and return the user id it was issued for.

    Raises:
        AuthenticationError: if the token is malformed, has a bad signature,
            is missing required claims, or has expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "iat", "exp"]},
        )
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid or expired token") from e

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        raise AuthenticationError("Invalid or expired token")
    return subject
