"""
Job posting service.

Employer-side CRUD for job listings and their screening questions, plus the
public search listing and the employer and seeker dashboards.
"""
import logging
import math
import re
from typing import List, Optional, Tuple

from sqlalchemy import or_, func, case, select
from sqlalchemy.orm import Session

from jobnest.core.config import JOBS_PAGE_SIZE
from jobnest.core.errors import ValidationError, NotFoundError
from jobnest.db.models import Job, JobQuestion, Application, EmployerProfile, JobSeekerProfile
from jobnest.db.models.application import STATUS_APPLIED, STATUS_ACCEPTED, STATUS_REJECTED
from jobnest.services import application_service
from jobnest.schemas.job import JobCreate, JobUpdate, JobFilter, JobResponse, JobDetailResponse, JobQuestionResponse

logger = logging.getLogger(__name__)

# Placeholder values the search form sends for "no filter"
ANY_TYPE = "All Types"
ANY_DOMAIN = "All Domains"
ANY_CURRENCY = "any"

SEEKER_RECENT_APPLICATIONS = 5
RECOMMENDED_JOBS = 6

_FIRST_NUMBER = re.compile(r"\d+")


def salary_floor(salary: Optional[str]) -> Optional[int]:
    """First run of digits in the salary text, e.g. '$90000 - $120000' -> 90000."""
    if not salary:
        return None
    match = _FIRST_NUMBER.search(salary)
    return int(match.group()) if match else None


def _meets_min_salary(salary: Optional[str], minimum: int) -> bool:
    floor = salary_floor(salary)
    return floor is not None and floor >= minimum


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def job_to_response(job: Job, company_name: Optional[str] = None, company_logo: Optional[str] = None) -> JobResponse:
    response = JobResponse.model_validate(job)
    response.company_name = company_name
    response.company_logo = company_logo
    return response


def create_job(db: Session, employer_id: int, data: JobCreate) -> Job:
    """
    Insert a job and its non-blank custom questions.

    Question order follows submission index starting at 1.
    """
    if _blank(data.title) or _blank(data.description):
        raise ValidationError("Job title and description are required")
    if _blank(data.contact_email):
        raise ValidationError("Contact email is required")

    job = Job(
        employer_id=employer_id,
        title=data.title.strip(),
        description=data.description.strip(),
        contact_email=data.contact_email.strip(),
        experience_required=data.experience_required or None,
        salary=data.salary or None,
        location=data.location or None,
        country=data.country or None,
        is_remote=bool(data.is_remote),
        job_type=data.job_type or None,
        domain=data.domain or None,
        is_open=True,
    )
    db.add(job)
    db.flush()

    for index, question in enumerate(data.custom_questions):
        if _blank(question.text):
            continue
        db.add(JobQuestion(
            job_id=job.id,
            question_text=question.text.strip(),
            is_required=question.is_required,
            question_order=index + 1,
        ))

    db.commit()
    db.refresh(job)
    logger.info(f"Job created: job_id={job.id}, employer_id={employer_id}, questions={len(job.questions)}")
    return job


def get_owned_job(db: Session, employer_id: int, job_id: int) -> Job:
    job = db.query(Job).filter(Job.id == job_id, Job.employer_id == employer_id).first()
    if not job:
        raise NotFoundError("Job not found")
    return job


def update_job(db: Session, employer_id: int, job_id: int, data: JobUpdate) -> Job:
    job = get_owned_job(db, employer_id, job_id)

    update_data = data.model_dump(exclude_unset=True)
    for field in ("title", "description", "contact_email"):
        if field in update_data and _blank(update_data[field]):
            raise ValidationError(f"{field.replace('_', ' ').capitalize()} cannot be empty")

    for field, value in update_data.items():
        if field == "is_remote" and value is None:
            continue
        setattr(job, field, value)

    db.commit()
    db.refresh(job)
    logger.info(f"Job updated: job_id={job.id}, fields={sorted(update_data)}")
    return job


def toggle_job_open(db: Session, employer_id: int, job_id: int) -> Job:
    job = get_owned_job(db, employer_id, job_id)
    job.is_open = not job.is_open
    db.commit()
    db.refresh(job)
    logger.info(f"Job toggled: job_id={job.id}, is_open={job.is_open}")
    return job


def get_job(db: Session, job_id: int) -> JobDetailResponse:
    row = (
        db.query(Job, EmployerProfile.company_name, EmployerProfile.logo_url)
        .outerjoin(EmployerProfile, EmployerProfile.user_id == Job.employer_id)
        .filter(Job.id == job_id)
        .first()
    )
    if not row:
        raise NotFoundError("Job not found")

    job, company_name, logo_url = row
    detail = JobDetailResponse(**job_to_response(job, company_name, logo_url).model_dump())
    detail.questions = [JobQuestionResponse.model_validate(q) for q in job.questions]
    return detail


def list_job_questions(db: Session, job_id: int) -> List[JobQuestion]:
    return (
        db.query(JobQuestion)
        .filter(JobQuestion.job_id == job_id)
        .order_by(JobQuestion.question_order.asc(), JobQuestion.id.asc())
        .all()
    )


def list_jobs(db: Session, filters: JobFilter) -> Tuple[List[JobResponse], int, int]:
    """
    Public listing of open jobs, newest first.

    Returns (jobs on the requested page, total matches, total pages).
    """
    query = (
        db.query(Job, EmployerProfile.company_name, EmployerProfile.logo_url)
        .outerjoin(EmployerProfile, EmployerProfile.user_id == Job.employer_id)
        .filter(Job.is_open.is_(True))
    )

    if not _blank(filters.q):
        term = filters.q.strip()
        query = query.filter(or_(
            Job.title.icontains(term, autoescape=True),
            Job.description.icontains(term, autoescape=True),
            EmployerProfile.company_name.icontains(term, autoescape=True),
        ))

    if not _blank(filters.location):
        query = query.filter(Job.location.icontains(filters.location.strip(), autoescape=True))

    if filters.remote:
        query = query.filter(Job.is_remote.is_(True))

    if not _blank(filters.type) and filters.type != ANY_TYPE:
        query = query.filter(Job.job_type.icontains(filters.type.strip(), autoescape=True))

    if not _blank(filters.domain) and filters.domain != ANY_DOMAIN:
        query = query.filter(Job.domain.icontains(filters.domain.strip(), autoescape=True))

    if not _blank(filters.currency) and filters.currency != ANY_CURRENCY:
        query = query.filter(Job.salary.contains(filters.currency.strip(), autoescape=True))

    query = query.order_by(Job.posted_at.desc(), Job.id.desc())
    offset = (filters.page - 1) * JOBS_PAGE_SIZE

    if filters.min_salary is not None:
        # The threshold is read from free text, so it is applied in Python
        rows = [row for row in query.all() if _meets_min_salary(row[0].salary, filters.min_salary)]
        total = len(rows)
        page_rows = rows[offset:offset + JOBS_PAGE_SIZE]
    else:
        total = query.count()
        page_rows = query.offset(offset).limit(JOBS_PAGE_SIZE).all()

    jobs = [job_to_response(job, company_name, logo) for job, company_name, logo in page_rows]
    total_pages = math.ceil(total / JOBS_PAGE_SIZE)
    logger.debug(f"Jobs listed: total={total}, page={filters.page}")
    return jobs, total, total_pages


def employer_dashboard(db: Session, employer_id: int) -> dict:
    """Profile, ten most recent jobs with application counts, and totals."""
    profile = db.query(EmployerProfile).filter(EmployerProfile.user_id == employer_id).first()

    recent = (
        db.query(Job, func.count(Application.id))
        .outerjoin(Application, Application.job_id == Job.id)
        .filter(Job.employer_id == employer_id)
        .group_by(Job.id)
        .order_by(Job.posted_at.desc(), Job.id.desc())
        .limit(10)
        .all()
    )

    total_jobs, active_jobs = db.query(
        func.count(Job.id),
        func.coalesce(func.sum(case((Job.is_open.is_(True), 1), else_=0)), 0),
    ).filter(Job.employer_id == employer_id).one()

    total_applications, pending_applications = (
        db.query(
            func.count(Application.id),
            func.coalesce(func.sum(case((Application.status == STATUS_APPLIED, 1), else_=0)), 0),
        )
        .join(Job, Job.id == Application.job_id)
        .filter(Job.employer_id == employer_id)
        .one()
    )

    return {
        "profile": profile,
        "jobs": [
            {**job_to_response(job).model_dump(), "application_count": count}
            for job, count in recent
        ],
        "stats": {
            "total_jobs": total_jobs,
            "active_jobs": int(active_jobs),
            "total_applications": total_applications,
            "pending_applications": int(pending_applications),
        },
    }


def _mentions(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle.lower() in value.lower()


def _matches_preferences(job: Job, preferences: dict, seeker_location: Optional[str]) -> bool:
    domains = [d for d in preferences.get("domains") or [] if isinstance(d, str) and d.strip()]
    if domains and not any(_mentions(job.domain, d.strip()) for d in domains):
        return False

    level = preferences.get("experience_level")
    if isinstance(level, str) and level.strip() and not _mentions(job.experience_required, level.strip()):
        return False

    if preferences.get("remote_work") is False and job.is_remote:
        return False

    if seeker_location and seeker_location.strip():
        place = seeker_location.strip()
        if not (_mentions(job.location, place) or _mentions(job.country, place)):
            return False

    return True


def seeker_dashboard(db: Session, seeker_id: int) -> dict:
    """
    Profile, latest applications, application totals and up to six open jobs
    the seeker has not applied to yet.

    Recommendations are narrowed by the saved job preferences (domains,
    experience level, remote_work) and the profile location. Without saved
    preferences the newest open jobs are recommended as they are.
    """
    profile = db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == seeker_id).first()

    applications = application_service.list_seeker_applications(db, seeker_id)

    applied = select(Application.job_id).where(Application.seeker_id == seeker_id)
    candidates = (
        db.query(Job, EmployerProfile.company_name, EmployerProfile.logo_url)
        .outerjoin(EmployerProfile, EmployerProfile.user_id == Job.employer_id)
        .filter(Job.is_open.is_(True), Job.id.notin_(applied))
        .order_by(Job.posted_at.desc(), Job.id.desc())
        .all()
    )

    preferences = profile.job_preferences if profile else None
    if preferences:
        candidates = [
            row for row in candidates
            if _matches_preferences(row[0], preferences, profile.location)
        ]

    return {
        "profile": profile,
        "applications": applications[:SEEKER_RECENT_APPLICATIONS],
        "recommended_jobs": [
            job_to_response(job, company_name, logo_url)
            for job, company_name, logo_url in candidates[:RECOMMENDED_JOBS]
        ],
        "stats": {
            "total_applications": len(applications),
            "accepted": sum(1 for a in applications if a.status == STATUS_ACCEPTED),
            "rejected": sum(1 for a in applications if a.status == STATUS_REJECTED),
            "pending": sum(1 for a in applications if a.status == STATUS_APPLIED),
        },
    }
