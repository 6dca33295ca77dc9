"""Tests for password hashing and access tokens."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.auth.dependencies import CurrentUser
from app.auth.security import create_access_token, decode_access_token, hash_password, verify_password
from app.db.models import User
from app.errors import AuthError


def test_password_roundtrip():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_malformed_hash_is_rejected():
    assert verify_password("secret123", "not-a-bcrypt-hash") is False


def test_token_claims():
    claims = decode_access_token(create_access_token("user-1", "a@example.com"))
    assert claims["sub"] == "user-1"
    assert claims["email"] == "a@example.com"


def test_expired_token():
    token = create_access_token("user-1", "a@example.com", expires_in=timedelta(seconds=-10))
    with pytest.raises(AuthError, match="Invalid or expired token"):
        decode_access_token(token)


def test_tampered_token():
    token = create_access_token("user-1", "a@example.com")
    with pytest.raises(AuthError):
        decode_access_token(token[:-4] + "abcd")


@pytest.mark.parametrize("role,admin,elevated", [
    ("admin", True, True),
    ("clinician", False, True),
    ("radiologist", False, True),
    ("moderator", False, False),
    ("user", False, False),
])
def test_role_flags(role, admin, elevated):
    current = CurrentUser(user=User(id="u1", email="x@example.com", password_hash="h"), role=role)
    assert current.is_admin is admin
    assert current.has_elevated_access is elevated
    assert current.is_clinician is (role == "clinician")
    assert current.is_radiologist is (role == "radiologist")
