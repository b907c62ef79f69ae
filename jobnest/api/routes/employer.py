"""
Employer endpoints: company profile, job postings and the applications they
receive.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobnest.db.session import get_db
from jobnest.db.models.user import User
from jobnest.core.auth_dependency import require_employer
from jobnest.schemas.profile import EmployerProfileRequest, EmployerProfileResponse
from jobnest.schemas.job import JobCreate, JobUpdate, JobResponse
from jobnest.schemas.application import (
    StatusUpdateRequest,
    StatusUpdateResponse,
    AskQuestionRequest,
    EmployerApplicationResponse,
)
from jobnest.services import profile_service, job_service, application_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employer", tags=["Employer"])


@router.get("/profile", response_model=Optional[EmployerProfileResponse])
def get_profile(
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    return profile_service.get_employer_profile(db, current_user.id)


@router.post("/profile", response_model=EmployerProfileResponse)
def save_profile(
    payload: EmployerProfileRequest,
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    return profile_service.save_employer_profile(db, current_user.id, payload)


@router.get("/dashboard")
def dashboard(
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    """
    Company profile, the ten most recent postings with application counts,
    and posting/application totals.
    """
    data = job_service.employer_dashboard(db, current_user.id)
    profile = data["profile"]
    data["profile"] = EmployerProfileResponse.model_validate(profile).model_dump() if profile else None
    return data


@router.post("/jobs", status_code=status.HTTP_201_CREATED, response_model=JobResponse)
def create_job(
    payload: JobCreate,
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    return job_service.create_job(db, current_user.id, payload)


@router.put("/jobs/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    payload: JobUpdate,
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    return job_service.update_job(db, current_user.id, job_id, payload)


@router.post("/jobs/{job_id}/toggle", response_model=JobResponse)
def toggle_job(
    job_id: int,
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    return job_service.toggle_job_open(db, current_user.id, job_id)


@router.get("/jobs/{job_id}/applications", response_model=List[EmployerApplicationResponse])
def job_applications(
    job_id: int,
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    return application_service.list_job_applications(db, current_user.id, job_id)


@router.patch("/applications/{application_id}", response_model=StatusUpdateResponse)
def update_application_status(
    application_id: int,
    payload: StatusUpdateRequest,
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    return application_service.update_status(
        db, current_user, application_id, payload.status, payload.notes
    )


@router.post("/applications/{application_id}/questions", status_code=status.HTTP_201_CREATED)
def ask_question(
    application_id: int,
    payload: AskQuestionRequest,
    current_user: User = Depends(require_employer),
    db: Session = Depends(get_db)
):
    question = application_service.ask_question(db, current_user, application_id, payload.question_text)
    return {
        "message": "Question sent to applicant",
        "question_id": question.id,
    }
