"""
Pydantic schemas for job endpoints.
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class CustomQuestion(BaseModel):
    """Screening question submitted with a new job."""
    text: Optional[str] = Field(None, description="Question text")
    is_required: bool = Field(False, alias="isRequired", description="Whether an answer is mandatory")

    class Config:
        populate_by_name = True


class JobCreate(BaseModel):
    """Schema for posting a new job."""
    title: Optional[str] = Field(None, description="Job title", max_length=255)
    description: Optional[str] = Field(None, description="Job description")
    contact_email: Optional[str] = Field(None, description="Where applicants can reach the employer")
    experience_required: Optional[str] = Field(None, max_length=100)
    salary: Optional[str] = Field(None, description="Free-text salary, e.g. '$90000 - $120000'", max_length=100)
    location: Optional[str] = Field(None, max_length=255)
    country: Optional[str] = Field(None, max_length=100)
    is_remote: bool = False
    job_type: Optional[str] = Field(None, max_length=50)
    domain: Optional[str] = Field(None, max_length=100)
    custom_questions: List[CustomQuestion] = Field(default_factory=list, alias="customQuestions")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Backend Engineer",
                "description": "Build and run our APIs.",
                "contact_email": "jobs@acme.test",
                "salary": "$90000 - $120000",
                "location": "Berlin",
                "is_remote": True,
                "job_type": "Full-time",
                "domain": "Engineering",
                "customQuestions": [{"text": "Years of experience?", "isRequired": True}]
            }
        }


class JobUpdate(BaseModel):
    """Schema for updating an existing job. Only provided fields change."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    contact_email: Optional[str] = Field(None, min_length=1)
    experience_required: Optional[str] = Field(None, max_length=100)
    salary: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=255)
    country: Optional[str] = Field(None, max_length=100)
    is_remote: Optional[bool] = None
    job_type: Optional[str] = Field(None, max_length=50)
    domain: Optional[str] = Field(None, max_length=100)


class JobQuestionResponse(BaseModel):
    id: int
    question_text: str
    is_required: bool
    question_order: int

    class Config:
        from_attributes = True


class JobResponse(BaseModel):
    id: int
    employer_id: int
    title: str
    description: str
    contact_email: str
    experience_required: Optional[str]
    salary: Optional[str]
    location: Optional[str]
    country: Optional[str]
    is_remote: bool
    job_type: Optional[str]
    domain: Optional[str]
    is_open: bool
    posted_at: datetime
    updated_at: datetime
    company_name: Optional[str] = None
    company_logo: Optional[str] = None

    class Config:
        from_attributes = True


class JobDetailResponse(JobResponse):
    questions: List[JobQuestionResponse] = Field(default_factory=list)


class JobListResponse(BaseModel):
    """Paginated public job listing."""
    jobs: List[JobResponse] = Field(..., description="Jobs on this page")
    total: int = Field(..., description="Number of jobs matching the filters")
    page: int = Field(1, description="Current page number (1-indexed)")
    page_size: int = Field(10, description="Number of items per page")
    total_pages: int = Field(0, description="Number of pages")


class JobFilter(BaseModel):
    """Public listing filters; every field is optional and combined with AND."""
    q: Optional[str] = Field(None, description="Search in title, description and company name")
    location: Optional[str] = Field(None, description="Location substring")
    remote: bool = Field(False, description="Only remote jobs")
    type: Optional[str] = Field(None, description="Job type substring")
    domain: Optional[str] = Field(None, description="Domain substring")
    currency: Optional[str] = Field(None, description="Currency symbol within the salary text")
    min_salary: Optional[int] = Field(None, ge=0, description="Minimum salary (first number in salary text)")
    page: int = Field(1, ge=1, description="Page number")
