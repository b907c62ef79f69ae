"""
Resume library for job seekers.

A seeker with at least one resume always has exactly one default. Upload,
set-default and delete keep that true within a single commit.
"""
import logging
import time
from typing import List, Optional

from sqlalchemy.orm import Session

from jobnest.core.config import MAX_RESUME_BYTES
from jobnest.core.errors import ValidationError, NotFoundError, ConflictError
from jobnest.db.models import Resume
from jobnest.services.storage import BlobStore

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def _default_title(filename: str) -> str:
    if filename.lower().endswith(".pdf"):
        return filename[:-4]
    return filename


def list_resumes(db: Session, user_id: int) -> List[Resume]:
    return (
        db.query(Resume)
        .filter(Resume.user_id == user_id)
        .order_by(Resume.is_default.desc(), Resume.created_at.desc(), Resume.id.desc())
        .all()
    )


def _get_owned(db: Session, user_id: int, resume_id: int) -> Resume:
    resume = db.query(Resume).filter(Resume.id == resume_id, Resume.user_id == user_id).first()
    if not resume:
        raise NotFoundError("Resume not found or unauthorized")
    return resume


def upload(
    db: Session,
    store: BlobStore,
    user_id: int,
    filename: Optional[str],
    content_type: Optional[str],
    data: Optional[bytes],
    title: Optional[str] = None,
) -> Resume:
    """
    Store a PDF and record it. The seeker's first resume becomes the default.
    """
    if not filename or data is None:
        raise ValidationError("No resume file provided")
    if content_type != PDF_CONTENT_TYPE:
        raise ValidationError("Only PDF files are allowed")
    if len(data) > MAX_RESUME_BYTES:
        raise ValidationError("File size must be less than 5MB")

    blob_name = f"{user_id}-{int(time.time() * 1000)}-{filename}"
    url = store.put(blob_name, data, content_type)

    has_any = db.query(Resume.id).filter(Resume.user_id == user_id).first() is not None
    resume = Resume(
        user_id=user_id,
        title=(title or "").strip() or _default_title(filename),
        file_url=url,
        file_name=filename,
        file_size=len(data),
        is_default=not has_any,
    )
    db.add(resume)
    try:
        db.commit()
    except Exception:
        db.rollback()
        store.delete(url)
        raise
    db.refresh(resume)
    logger.info(f"Resume uploaded: resume_id={resume.id}, user_id={user_id}, default={resume.is_default}")
    return resume


def set_default(db: Session, user_id: int, resume_id: int) -> Resume:
    resume = _get_owned(db, user_id, resume_id)

    db.query(Resume).filter(Resume.user_id == user_id).update(
        {Resume.is_default: False}, synchronize_session=False
    )
    resume.is_default = True
    db.commit()
    db.refresh(resume)
    logger.info(f"Default resume set: resume_id={resume.id}, user_id={user_id}")
    return resume


def delete(db: Session, store: BlobStore, user_id: int, resume_id: int) -> Optional[Resume]:
    """
    Delete a resume, promoting the newest remaining one if it was the default.

    Returns the promoted resume, if any. The blob is removed after the rows
    are committed.
    """
    resume = _get_owned(db, user_id, resume_id)

    others = (
        db.query(Resume)
        .filter(Resume.user_id == user_id, Resume.id != resume.id)
        .order_by(Resume.created_at.desc(), Resume.id.desc())
        .all()
    )
    if resume.is_default and not others:
        logger.warning(f"Refused to delete sole default resume: resume_id={resume.id}, user_id={user_id}")
        raise ConflictError(
            "Cannot delete the only default resume. Please upload another or set a new default first."
        )

    promoted = None
    if resume.is_default:
        promoted = others[0]
        promoted.is_default = True

    file_url = resume.file_url
    db.delete(resume)
    db.commit()

    store.delete(file_url)
    logger.info(
        f"Resume deleted: resume_id={resume_id}, user_id={user_id}, "
        f"promoted={promoted.id if promoted else None}"
    )
    return promoted
