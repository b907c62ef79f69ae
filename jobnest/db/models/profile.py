"""
Seeker and employer profiles. Each user owns at most one profile of the
kind matching their role.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, backref
from jobnest.db.base import Base


class JobSeekerProfile(Base):
    __tablename__ = "job_seeker_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    education = Column(Text, nullable=True)
    phone_number = Column(String(50), nullable=True)

    # Free-form preferences document: domains, skills, job_types,
    # preferred_locations, remote, salary range ...
    job_preferences = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", backref=backref("seeker_profile", uselist=False, passive_deletes=True))

    def __repr__(self):
        return f"<JobSeekerProfile(id={self.id}, user_id={self.user_id}, name='{self.name}')>"


class EmployerProfile(Base):
    __tablename__ = "employer_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    company_name = Column(String(255), nullable=False, index=True)
    website = Column(String(255), nullable=True)
    logo_url = Column(String(500), nullable=True)
    location = Column(String(255), nullable=True)
    industry = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", backref=backref("employer_profile", uselist=False, passive_deletes=True))

    def __repr__(self):
        return f"<EmployerProfile(id={self.id}, company_name='{self.company_name}')>"
