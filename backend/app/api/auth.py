"""POST /api/auth/signup, /api/auth/signin and GET /api/auth/me."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.dependencies import CurrentUser, get_current_user, get_user_role
from app.auth.security import create_access_token, hash_password, verify_password
from app.db.models import Profile, User, UserRole
from app.db.session import get_db
from app.errors import AuthError, Conflict
from app.models.requests import AuthRequest
from app.models.responses import TokenResponse, UserOut

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)


def _user_out(current: CurrentUser) -> UserOut:
    return UserOut(
        id=current.id,
        email=current.user.email,
        role=current.role,
        is_admin=current.is_admin,
        has_elevated_access=current.has_elevated_access,
    )


def _token_response(current: CurrentUser) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(current.id, current.user.email),
        user=_user_out(current),
    )


@router.post("/signup", response_model=TokenResponse, status_code=201)
def signup(req: AuthRequest, db: Session = Depends(get_db)) -> TokenResponse:
    email = req.email.strip().lower()
    if db.query(User).filter(User.email == email).one_or_none() is not None:
        raise Conflict("This email is already registered. Please sign in instead.")

    user = User(email=email, password_hash=hash_password(req.password))
    db.add(user)
    db.flush()
    db.add(UserRole(user_id=user.id, role="user"))
    db.add(Profile(user_id=user.id))
    db.commit()

    logger.info("Registered user %s", user.id)
    return _token_response(CurrentUser(user=user, role="user"))


@router.post("/signin", response_model=TokenResponse)
def signin(req: AuthRequest, db: Session = Depends(get_db)) -> TokenResponse:
    user = db.query(User).filter(User.email == req.email.strip().lower()).one_or_none()
    if user is None or not verify_password(req.password, user.password_hash):
        raise AuthError("Invalid email or password")
    return _token_response(CurrentUser(user=user, role=get_user_role(db, user.id)))


@router.get("/me", response_model=UserOut)
def me(current: CurrentUser = Depends(get_current_user)) -> UserOut:
    return _user_out(current)
