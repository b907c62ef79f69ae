import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Response
from jose import jwt, JWTError
from passlib.context import CryptContext

from jobnest.core.config import (
    SECRET_KEY,
    ALGORITHM,
    ACCESS_TOKEN_EXPIRE_DAYS,
    AUTH_COOKIE_NAME,
    BCRYPT_ROUNDS,
    COOKIE_SECURE,
)

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72

# Use passlib context to verify hashes written by other bcrypt front-ends,
# but we'll use bcrypt directly for new hashes to avoid passlib issues
try:
    pwd_context = CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
    )
    logger.debug("Password context initialized")
except Exception as e:
    logger.warning(f"Failed to initialize passlib context: {e}, using bcrypt directly")
    pwd_context = None


def _truncate_password(password: str) -> bytes:
    """
    Encode to UTF-8 and cut to bcrypt's 72-byte limit without splitting a character.

    Validation should reject long passwords before this point; this is the
    safety net so bcrypt never raises on input length.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= BCRYPT_MAX_BYTES:
        return password_bytes

    logger.warning("Password exceeds 72 bytes, truncating before hashing (validation should have caught this)")
    truncated = password_bytes[:BCRYPT_MAX_BYTES]
    # Drop a partial trailing UTF-8 sequence
    return truncated.decode("utf-8", errors="ignore").encode("utf-8")


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt directly with a cost factor of 12.

    Returns:
        Hashed password string (bcrypt format compatible with passlib)

    Raises:
        ValueError: If password cannot be hashed
    """
    try:
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(_truncate_password(password), salt).decode("utf-8")
    except ValueError as e:
        logger.error(f"Password hashing failed (ValueError): {e}")
        raise ValueError("Invalid password") from e


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against its hash.

    Supports both bcrypt-native hashes and passlib-wrapped hashes.
    """
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(_truncate_password(password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        # If direct bcrypt fails, try passlib
        if pwd_context:
            try:
                return pwd_context.verify(password, hashed)
            except (ValueError, TypeError) as e:
                logger.warning(f"Password verification failed: {e}")
        return False


def create_access_token(user_id: int, email: str, role: str, expires_delta: timedelta = None) -> str:
    """Issue the signed session credential carrying {userId, email, role}."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS))
    to_encode = {
        "sub": str(user_id),
        "userId": user_id,
        "email": email,
        "role": role,
        "exp": expire,
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """
    Verify signature and expiry of a credential.

    Returns the payload, or None on any verification failure.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.info(f"JWT verification failed: {e}")
        return None

    if not isinstance(payload.get("userId"), int):
        logger.info("JWT verification failed: userId claim missing")
        return None
    return payload


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        max_age=60 * 60 * 24 * ACCESS_TOKEN_EXPIRE_DAYS,
        path="/",
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
    )


def clear_auth_cookie(response: Response) -> None:
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
    )
