"""
Pydantic schemas for seeker and employer profiles.
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class JobPreferences(BaseModel):
    """
    Structured job preferences. Known keys are typed; anything else the
    client sends is kept as-is.
    """
    domains: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    job_types: Optional[List[str]] = None
    preferred_locations: Optional[List[str]] = None
    remote: Optional[bool] = None
    remote_work: Optional[bool] = Field(None, description="False hides remote jobs from recommendations")
    experience_level: Optional[str] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: Optional[str] = None

    class Config:
        extra = "allow"


class SeekerProfileRequest(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    education: Optional[str] = None
    phone_number: Optional[str] = None
    job_preferences: Optional[JobPreferences] = None


class SeekerProfileResponse(BaseModel):
    id: int
    user_id: int
    name: str
    location: Optional[str]
    education: Optional[str]
    phone_number: Optional[str]
    job_preferences: Optional[dict]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EmployerProfileRequest(BaseModel):
    company_name: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None


class EmployerProfileResponse(BaseModel):
    id: int
    user_id: int
    company_name: str
    website: Optional[str]
    logo_url: Optional[str]
    location: Optional[str]
    industry: Optional[str]
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
