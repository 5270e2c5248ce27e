# File: app/core/security.py

"""
Security helpers for the Storefront API.

Passwords are hashed with bcrypt (auto-salted, configurable work factor).
Access tokens are JWTs signed with the configured secret via PyJWT.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from app.core.config import Settings, settings as default_settings


def hash_password(password: str, rounds: int) -> str:
    """Hash a password with bcrypt using ``rounds`` as the cost factor."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False


def create_access_token(
    subject: str,
    extra_claims: Optional[dict[str, Any]] = None,
    expires_delta: Optional[timedelta] = None,
    settings: Settings = default_settings,
) -> str:
    """
    Create a signed token for ``subject``.

    The token carries ``sub``, ``iat`` and ``exp`` plus any ``extra_claims``.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode: dict[str, Any] = dict(extra_claims or {})
    to_encode.update({"sub": subject, "iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings = default_settings) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises ``jwt.InvalidTokenError`` (or a subclass such as
    ``jwt.ExpiredSignatureError``) when the token cannot be trusted.
    """
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
