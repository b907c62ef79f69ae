"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from jobnest.db.models.user import User
from jobnest.db.models.profile import JobSeekerProfile, EmployerProfile
from jobnest.db.models.job import Job, JobQuestion
from jobnest.db.models.resume import Resume
from jobnest.db.models.application import Application, ApplicationAnswer, EmployerQuestion, SeekerAnswer
from jobnest.db.models.notification import Notification
from jobnest.db.models.payment import Payment

# Explicitly export all models for clarity
__all__ = [
    "User",
    "JobSeekerProfile",
    "EmployerProfile",
    "Job",
    "JobQuestion",
    "Resume",
    "Application",
    "ApplicationAnswer",
    "EmployerQuestion",
    "SeekerAnswer",
    "Notification",
    "Payment",
]
