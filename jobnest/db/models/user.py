from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from jobnest.db.base import Base

ROLE_JOB_SEEKER = "job_seeker"
ROLE_EMPLOYER = "employer"
ROLE_ADMIN = "admin"

ROLES = (ROLE_JOB_SEEKER, ROLE_EMPLOYER, ROLE_ADMIN)
SELF_SERVICE_ROLES = (ROLE_JOB_SEEKER, ROLE_EMPLOYER)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, index=True)  # job_seeker | employer | admin
    is_paid = Column(Boolean, default=False, nullable=False)
    email_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
