"""Password hashing (bcrypt) and bearer tokens (JWT via python-jose)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from app.config import settings
from app.errors import AuthError


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(user_id: str, email: str, expires_in: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_in or timedelta(hours=settings.jwt_expire_hours))
    payload = {"sub": user_id, "email": email, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """Return the token claims or raise ``AuthError`` for bad/expired tokens."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise AuthError("Invalid or expired token") from e
    if not payload.get("sub"):
        raise AuthError("Invalid or expired token")
    return payload
