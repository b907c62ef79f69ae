"""
Public job board endpoints.

Listing, detail and screening questions are open to anyone; applying
requires a job seeker session.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobnest.db.session import get_db
from jobnest.db.models.user import User
from jobnest.core.auth_dependency import require_seeker
from jobnest.core.config import JOBS_PAGE_SIZE
from jobnest.schemas.job import JobFilter, JobListResponse, JobDetailResponse, JobQuestionResponse
from jobnest.schemas.application import ApplyRequest
from jobnest.services import job_service, application_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=JobListResponse)
def list_jobs(
    q: Optional[str] = Query(None, description="Search in title, description and company name"),
    location: Optional[str] = Query(None),
    remote: bool = Query(False, description="Only remote jobs"),
    type: Optional[str] = Query(None, description="Job type, 'All Types' for any"),
    domain: Optional[str] = Query(None, description="Domain, 'All Domains' for any"),
    currency: Optional[str] = Query(None, description="Currency symbol, 'any' for any"),
    min_salary: Optional[int] = Query(None, ge=0),
    page: int = Query(1, ge=1, description="Page number"),
    db: Session = Depends(get_db)
):
    """
    List open jobs, newest first, ten per page.
    """
    filters = JobFilter(
        q=q,
        location=location,
        remote=remote,
        type=type,
        domain=domain,
        currency=currency,
        min_salary=min_salary,
        page=page,
    )
    jobs, total, total_pages = job_service.list_jobs(db, filters)

    return JobListResponse(
        jobs=jobs,
        total=total,
        page=page,
        page_size=JOBS_PAGE_SIZE,
        total_pages=total_pages,
    )


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    return job_service.get_job(db, job_id)


@router.get("/{job_id}/questions", response_model=List[JobQuestionResponse])
def get_job_questions(job_id: int, db: Session = Depends(get_db)):
    return job_service.list_job_questions(db, job_id)


@router.post("/{job_id}/apply", status_code=status.HTTP_201_CREATED)
def apply_to_job(
    job_id: int,
    payload: ApplyRequest,
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    application = application_service.apply(
        db,
        current_user,
        job_id,
        payload.resume_id,
        payload.question_answers,
    )
    return {
        "message": "Application submitted successfully",
        "application_id": application.id,
        "status": application.status,
    }
