"""
Create an admin account, or promote an existing account to admin.
Run: python -m scripts.create_admin admin@example.com [password]
"""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jobnest.db.session import SessionLocal
from jobnest.db.models.user import User, ROLE_ADMIN
from jobnest.core.security import hash_password, BCRYPT_MAX_BYTES
from jobnest.services.account_service import normalize_email
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_admin(email: str, password: str = None) -> bool:
    """Create or promote the user to the admin role."""
    email = normalize_email(email)
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()

        if not user:
            if not password:
                logger.error(f"User {email} not found and no password provided. Cannot create user.")
                return False
            if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
                logger.error("Password must be 72 bytes or fewer")
                return False

            logger.info(f"Creating new admin user: {email}")
            user = User(
                email=email,
                password_hash=hash_password(password),
                role=ROLE_ADMIN,
                is_paid=True,
                email_verified=True,
            )
            db.add(user)
        else:
            logger.info(f"Promoting existing user: {email} (ID: {user.id}, role: {user.role})")
            user.role = ROLE_ADMIN

        db.commit()
        db.refresh(user)
        logger.info(f"User {email} is now an admin (ID: {user.id})")
        return True

    except Exception as e:
        db.rollback()
        logger.error(f"Error creating admin: {e}", exc_info=True)
        return False
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.create_admin <email> [password]")
        sys.exit(2)

    email = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else None

    if create_admin(email, password):
        print(f"\n[SUCCESS] {email} is now an admin")
    else:
        print(f"\n[ERROR] Failed to set up admin {email}")
        sys.exit(1)
