"""
Job seeker endpoints: profile, applications, follow-up answers and the
resume library.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from jobnest.db.session import get_db
from jobnest.db.models.user import User
from jobnest.api.dependencies import get_blob_store
from jobnest.core.auth_dependency import require_seeker
from jobnest.schemas.profile import SeekerProfileRequest, SeekerProfileResponse
from jobnest.schemas.application import AnswerQuestionRequest, SeekerApplicationResponse
from jobnest.schemas.resume import ResumeResponse, ResumeListResponse, ResumeUploadResponse
from jobnest.services import profile_service, application_service, resume_service, job_service
from jobnest.services.storage import BlobStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seeker", tags=["Job Seeker"])


@router.get("/profile", response_model=Optional[SeekerProfileResponse])
def get_profile(
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    return profile_service.get_seeker_profile(db, current_user.id)


@router.post("/profile", response_model=SeekerProfileResponse)
def save_profile(
    payload: SeekerProfileRequest,
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    return profile_service.save_seeker_profile(db, current_user.id, payload)


@router.get("/dashboard")
def dashboard(
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    """
    Profile, the five latest applications, application totals and up to six
    recommended open jobs.
    """
    data = job_service.seeker_dashboard(db, current_user.id)
    profile = data["profile"]
    data["profile"] = SeekerProfileResponse.model_validate(profile).model_dump() if profile else None
    return data


@router.get("/applications", response_model=List[SeekerApplicationResponse])
def my_applications(
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    return application_service.list_seeker_applications(db, current_user.id)


@router.post("/applications/{question_id}/answers", status_code=status.HTTP_201_CREATED)
def answer_question(
    question_id: int,
    payload: AnswerQuestionRequest,
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    answer = application_service.answer_question(db, current_user, question_id, payload.answer_text)
    return {
        "message": "Answer submitted",
        "answer_id": answer.id,
    }


# ============================================
# ✅ RESUMES
# ============================================

@router.get("/resumes", response_model=ResumeListResponse)
def list_resumes(
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    return {"resumes": resume_service.list_resumes(db, current_user.id)}


@router.post("/resumes", status_code=status.HTTP_201_CREATED, response_model=ResumeUploadResponse)
async def upload_resume(
    file: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store)
):
    filename = file.filename if file else None
    content_type = file.content_type if file else None
    data = await file.read() if file else None

    resume = resume_service.upload(db, store, current_user.id, filename, content_type, data, title)

    return {
        "message": "Resume uploaded successfully",
        "url": resume.file_url,
        "resume": resume,
    }


@router.post("/resumes/{resume_id}/default", response_model=ResumeResponse)
def set_default_resume(
    resume_id: int,
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db)
):
    return resume_service.set_default(db, current_user.id, resume_id)


@router.delete("/resumes/{resume_id}")
def delete_resume(
    resume_id: int,
    current_user: User = Depends(require_seeker),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store)
):
    promoted = resume_service.delete(db, store, current_user.id, resume_id)
    return {
        "message": "Resume deleted successfully",
        "new_default_id": promoted.id if promoted else None,
    }
