import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from jobnest.db.session import get_db
from jobnest.db.models.user import User
from jobnest.core.auth_dependency import get_current_user
from jobnest.core.logging_config import sanitize_log_data
from jobnest.core.security import set_auth_cookie, clear_auth_cookie
from jobnest.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    DeleteAccountResponse,
)
from jobnest.services import account_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


# ✅ REGISTER
@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
def register(
    payload: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db)
):
    logger.debug(f"Register request: {sanitize_log_data(payload.model_dump())}")
    user, token = account_service.register(db, payload.email, payload.password, payload.role)
    set_auth_cookie(response, token)

    return {
        "message": "User created successfully",
        "user": user
    }


# ✅ LOGIN (cookie for browsers; the same token works as a bearer header)
@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db)
):
    logger.debug(f"Login request: {sanitize_log_data(payload.model_dump())}")
    user, token = account_service.login(db, payload.email, payload.password)
    set_auth_cookie(response, token)

    return {
        "message": "Login successful",
        "user": user
    }


# ✅ LOGOUT
@router.post("/logout")
def logout():
    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    clear_auth_cookie(response)
    return response


# ✅ DELETE ACCOUNT
@router.post("/delete-account", response_model=DeleteAccountResponse)
def delete_account(
    response: Response,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    steps = account_service.delete_account(db, current_user)
    clear_auth_cookie(response)

    return {
        "message": "Account deleted",
        "cleanup": [step.to_dict() for step in steps]
    }


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
