"""
Seeker and employer profile upserts.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from jobnest.core.errors import ValidationError
from jobnest.db.models import JobSeekerProfile, EmployerProfile
from jobnest.schemas.profile import SeekerProfileRequest, EmployerProfileRequest

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def get_seeker_profile(db: Session, user_id: int) -> Optional[JobSeekerProfile]:
    return db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == user_id).first()


def get_employer_profile(db: Session, user_id: int) -> Optional[EmployerProfile]:
    return db.query(EmployerProfile).filter(EmployerProfile.user_id == user_id).first()


def save_seeker_profile(db: Session, user_id: int, data: SeekerProfileRequest) -> JobSeekerProfile:
    """Create or update the seeker's single profile."""
    name, location, education = _clean(data.name), _clean(data.location), _clean(data.education)
    if not name or not location or not education:
        raise ValidationError("Name, location, and education are required")

    preferences = data.job_preferences.model_dump(exclude_none=True) if data.job_preferences else None

    profile = get_seeker_profile(db, user_id)
    created = profile is None
    if created:
        profile = JobSeekerProfile(user_id=user_id)
        db.add(profile)

    profile.name = name
    profile.location = location
    profile.education = education
    profile.phone_number = _clean(data.phone_number)
    profile.job_preferences = preferences

    db.commit()
    db.refresh(profile)
    logger.info(f"Seeker profile {'created' if created else 'updated'}: user_id={user_id}")
    return profile


def save_employer_profile(db: Session, user_id: int, data: EmployerProfileRequest) -> EmployerProfile:
    """Create or update the employer's single profile."""
    company_name = _clean(data.company_name)
    if not company_name:
        raise ValidationError("Company name is required")
    location = _clean(data.location)
    if not location:
        raise ValidationError("Location is required")
    industry = _clean(data.industry)
    if not industry:
        raise ValidationError("Industry is required")

    profile = get_employer_profile(db, user_id)
    created = profile is None
    if created:
        profile = EmployerProfile(user_id=user_id)
        db.add(profile)

    profile.company_name = company_name
    profile.website = _clean(data.website)
    profile.logo_url = _clean(data.logo_url)
    profile.location = location
    profile.industry = industry
    profile.description = _clean(data.description)

    db.commit()
    db.refresh(profile)
    logger.info(f"Employer profile {'created' if created else 'updated'}: user_id={user_id}")
    return profile
