"""
Account service: registration, login and account removal.
"""
import logging
from dataclasses import dataclass, asdict
from typing import Optional, List, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobnest.core.config import REQUIRE_SEEKER_ACTIVATION
from jobnest.core.errors import ValidationError, AuthError, ConflictError
from jobnest.core.security import hash_password, verify_password, create_access_token, BCRYPT_MAX_BYTES
from jobnest.db.models import (
    User,
    Application,
    Job,
    Resume,
    Notification,
    JobSeekerProfile,
    EmployerProfile,
)
from jobnest.db.models.user import ROLE_JOB_SEEKER, SELF_SERVICE_ROLES

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class CleanupStep:
    table: str
    ok: bool
    deleted: int = 0
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


# Dependent rows removed before the user row, in this order.
ACCOUNT_CLEANUP_STEPS = (
    ("applications", Application, Application.seeker_id),
    ("jobs", Job, Job.employer_id),
    ("resumes", Resume, Resume.user_id),
    ("notifications", Notification, Notification.user_id),
    ("job_seeker_profiles", JobSeekerProfile, JobSeekerProfile.user_id),
    ("employer_profiles", EmployerProfile, EmployerProfile.user_id),
)


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def initial_paid_flag(role: str) -> bool:
    """
    Paid flag written at registration.

    Unless activation is enforced every account starts paid, which keeps the
    activation checkout optional.
    """
    if REQUIRE_SEEKER_ACTIVATION and role == ROLE_JOB_SEEKER:
        return False
    return True


def issue_token(user: User) -> str:
    return create_access_token(user.id, user.email, user.role)


def register(db: Session, email: Optional[str], password: Optional[str], role: Optional[str]) -> Tuple[User, str]:
    """
    Create an account and return it with a fresh session credential.

    Raises:
        ValidationError: missing field, unknown role, or password over 72 bytes
        ConflictError: email already registered
    """
    email = normalize_email(email)
    if not email or not password or not role:
        raise ValidationError("Missing required fields")

    if role not in SELF_SERVICE_ROLES:
        raise ValidationError("Invalid role")

    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError("Password must be 72 bytes or fewer")

    if db.query(User.id).filter(User.email == email).first():
        raise ConflictError("User already exists")

    user = User(
        email=email,
        password_hash=hash_password(password),
        role=role,
        is_paid=initial_paid_flag(role),
        email_verified=False,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("User already exists")
    db.refresh(user)

    logger.info(f"User created: user_id={user.id}, role={user.role}")
    return user, issue_token(user)


def login(db: Session, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
    """
    Check credentials and return the user with a fresh session credential.

    Unknown email and wrong password produce the same AuthError.
    """
    email = normalize_email(email)
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.password_hash):
        logger.info("Login failed: invalid credentials")
        raise AuthError(INVALID_CREDENTIALS)

    logger.info(f"Login successful: user_id={user.id}")
    return user, issue_token(user)


def delete_account(db: Session, user: User) -> List[CleanupStep]:
    """
    Remove every row owned by the user, then the user.

    Each dependent delete runs in its own savepoint: a failing step is
    recorded in the returned list and does not stop the remaining steps or
    the final user delete.
    """
    user_id = user.id
    steps: List[CleanupStep] = []

    for table, model, owner_column in ACCOUNT_CLEANUP_STEPS:
        try:
            with db.begin_nested():
                deleted = db.query(model).filter(owner_column == user_id).delete(synchronize_session=False)
            steps.append(CleanupStep(table=table, ok=True, deleted=deleted))
        except SQLAlchemyError as e:
            logger.warning(f"Account cleanup step failed: user_id={user_id}, table={table}, error={e}")
            steps.append(CleanupStep(table=table, ok=False, error=str(e.__class__.__name__)))

    try:
        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    db.expunge_all()
    failed = [step.table for step in steps if not step.ok]
    logger.info(f"Account deleted: user_id={user_id}, failed_steps={failed}")
    return steps
