from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from jobnest.core.config import AUTH_COOKIE_NAME
from jobnest.core.errors import AuthError, AuthzError
from jobnest.core.security import decode_access_token
from jobnest.db.session import get_db
from jobnest.db.models.user import User, ROLE_JOB_SEEKER, ROLE_EMPLOYER, ROLE_ADMIN

# Browsers carry the credential in the auth-token cookie; API clients may
# send it as a bearer token instead.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def get_token(request: Request, bearer: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    return request.cookies.get(AUTH_COOKIE_NAME) or bearer


def resolve_user(db: Session, token: Optional[str]) -> Optional[User]:
    """
    Map a credential to the live User row.

    Fails closed: a bad signature, an expired token or a user that no longer
    exists all yield None.
    """
    payload = decode_access_token(token)
    if payload is None:
        return None
    return db.query(User).filter(User.id == payload["userId"]).first()


def get_optional_user(
    token: Optional[str] = Depends(get_token),
    db: Session = Depends(get_db),
) -> Optional[User]:
    return resolve_user(db, token)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Get the current User object from the session credential."""
    if user is None:
        raise AuthError("Unauthorized")
    return user


def require_role(role: str):
    """
    Dependency factory gating a route on the user's live role.

    The role claim embedded in the token is never trusted; the row fetched by
    get_current_user is the source of truth.
    """
    def checker(user: User = Depends(get_current_user)) -> User:
        if user.role != role:
            raise AuthzError("Unauthorized")
        return user

    return checker


require_seeker = require_role(ROLE_JOB_SEEKER)
require_employer = require_role(ROLE_EMPLOYER)
require_admin = require_role(ROLE_ADMIN)
