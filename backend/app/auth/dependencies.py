"""Current-user and role dependencies."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.auth.security import decode_access_token
from app.db.models import ELEVATED_ROLES, User, UserRole
from app.db.session import get_db
from app.errors import AuthError, PermissionDenied

_bearer = HTTPBearer(auto_error=False)


@dataclass
class CurrentUser:
    user: User
    role: str

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def is_clinician(self) -> bool:
        return self.role == "clinician"

    @property
    def is_radiologist(self) -> bool:
        return self.role == "radiologist"

    @property
    def has_elevated_access(self) -> bool:
        return self.role in ELEVATED_ROLES


def get_user_role(db: Session, user_id: str) -> str:
    """Role row for the user, or ``"user"`` when none was assigned."""
    row = db.query(UserRole).filter(UserRole.user_id == user_id).one_or_none()
    return row.role if row is not None else "user"


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: Session = Depends(get_db),
) -> CurrentUser:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError()
    claims = decode_access_token(credentials.credentials)
    user = db.get(User, claims["sub"])
    if user is None:
        raise AuthError("Invalid or expired token")
    return CurrentUser(user=user, role=get_user_role(db, user.id))


def require_admin(current: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not current.is_admin:
        raise PermissionDenied()
    return current
