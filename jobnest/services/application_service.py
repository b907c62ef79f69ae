"""
Application workflow service.

Seekers apply to jobs with a resume and screening answers; employers move
applications through the status lifecycle and open a follow-up question
thread that seekers answer. Every transition that concerns the other party
appends a notification in the same transaction.

Status lifecycle:

    applied ──> accepted | rejected | waitlisted
    waitlisted ──> accepted

accepted and rejected are terminal.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from jobnest.core.config import REQUIRE_SEEKER_ACTIVATION
from jobnest.core.errors import (
    ValidationError,
    NotFoundError,
    AuthzError,
    ConflictError,
    StateError,
    PreconditionError,
)
from jobnest.db.models import (
    User,
    Job,
    Resume,
    Application,
    ApplicationAnswer,
    EmployerQuestion,
    SeekerAnswer,
    JobSeekerProfile,
    EmployerProfile,
)
from jobnest.db.models.application import (
    STATUS_APPLIED,
    STATUS_ACCEPTED,
    STATUS_REJECTED,
    STATUS_WAITLISTED,
)
from jobnest.services import notification_service
from jobnest.schemas.application import (
    SeekerApplicationResponse,
    EmployerApplicationResponse,
    ThreadQuestionResponse,
    ScreeningAnswerResponse,
)

logger = logging.getLogger(__name__)

# Statuses an employer may set
EMPLOYER_STATUSES = (STATUS_ACCEPTED, STATUS_REJECTED, STATUS_WAITLISTED)

ALLOWED_TRANSITIONS: Dict[str, tuple] = {
    STATUS_APPLIED: (STATUS_ACCEPTED, STATUS_REJECTED, STATUS_WAITLISTED),
    STATUS_WAITLISTED: (STATUS_ACCEPTED,),
    STATUS_ACCEPTED: (),
    STATUS_REJECTED: (),
}

# status -> (notification type, message template)
STATUS_NOTIFICATIONS = {
    STATUS_ACCEPTED: (
        "success",
        'Great news! Your application for "{job_title}" has been accepted.',
    ),
    STATUS_REJECTED: (
        "error",
        'Thank you for your interest. Your application for "{job_title}" was not selected this time.',
    ),
    STATUS_WAITLISTED: (
        "info",
        'Your application for "{job_title}" has been waitlisted. We\'ll keep you updated.',
    ),
}


def can_transition(current: str, new: str) -> bool:
    return new in ALLOWED_TRANSITIONS.get(current, ())


def _has_text(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _parse_question_id(key) -> Optional[int]:
    try:
        return int(key)
    except (TypeError, ValueError):
        return None


def apply(
    db: Session,
    seeker: User,
    job_id: int,
    resume_id: Optional[int],
    answers: Optional[Dict[str, Optional[str]]] = None,
) -> Application:
    """
    Submit an application for a job.

    Checks run in a fixed order so the first failing precondition is the one
    reported. The application and its screening answers are committed
    together.
    """
    answers = answers or {}

    if not resume_id:
        raise ValidationError("Please select a resume to apply")

    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError("Job not found")

    if not job.is_open:
        raise StateError("Job is no longer accepting applications")

    existing = db.query(Application.id).filter(
        Application.job_id == job_id,
        Application.seeker_id == seeker.id,
    ).first()
    if existing:
        raise ConflictError("You have already applied for this job")

    has_profile = db.query(JobSeekerProfile.id).filter(JobSeekerProfile.user_id == seeker.id).first()
    if not has_profile:
        raise PreconditionError("Please complete your profile before applying")

    if REQUIRE_SEEKER_ACTIVATION and not seeker.is_paid:
        raise PreconditionError("Please activate your account before applying")

    resume = db.query(Resume.id).filter(Resume.id == resume_id, Resume.user_id == seeker.id).first()
    if not resume:
        raise AuthzError("Selected resume not found or unauthorized")

    questions = {q.id: q for q in job.questions}
    for question in job.questions:
        if question.is_required and not _has_text(answers.get(str(question.id))):
            raise ValidationError(f'Please answer the required question: "{question.question_text}"')

    application = Application(
        job_id=job_id,
        seeker_id=seeker.id,
        resume_id=resume_id,
        status=STATUS_APPLIED,
    )
    db.add(application)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise ConflictError("You have already applied for this job")

    for key, answer in answers.items():
        if not _has_text(answer):
            continue
        question_id = _parse_question_id(key)
        if question_id not in questions:
            logger.warning(f"Skipping answer to unknown question: job_id={job_id}, question_key={key}")
            continue
        db.add(ApplicationAnswer(
            application_id=application.id,
            question_id=question_id,
            answer_text=answer.strip(),
        ))

    db.commit()
    db.refresh(application)
    logger.info(f"Application created: application_id={application.id}, job_id={job_id}, seeker_id={seeker.id}")
    return application


def _get_employer_application(db: Session, employer_id: int, application_id: int) -> Application:
    """Application whose job belongs to the employer; 404 otherwise."""
    application = (
        db.query(Application)
        .join(Job, Job.id == Application.job_id)
        .filter(Application.id == application_id, Job.employer_id == employer_id)
        .first()
    )
    if not application:
        raise NotFoundError("Application not found")
    return application


def update_status(
    db: Session,
    employer: User,
    application_id: int,
    status: Optional[str],
    notes: Optional[str] = None,
) -> dict:
    """
    Move an application to accepted/rejected/waitlisted and notify the seeker.

    Returns the applicant's contact details for the employer.
    """
    if status not in EMPLOYER_STATUSES:
        raise ValidationError("Invalid status")

    application = _get_employer_application(db, employer.id, application_id)

    if not can_transition(application.status, status):
        raise StateError(f"Cannot change an application from {application.status} to {status}")

    job_title = application.job.title
    application.status = status
    application.employer_notes = notes or None
    application.status_updated_at = func.now()

    notification_type, template = STATUS_NOTIFICATIONS[status]
    notification_service.notify(
        db,
        user_id=application.seeker_id,
        title=f"Application {status.capitalize()}",
        message=template.format(job_title=job_title),
        type=notification_type,
        related_application_id=application.id,
    )

    db.commit()

    seeker = application.seeker
    profile = db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == seeker.id).first()
    logger.info(f"Application status updated: application_id={application.id}, status={status}")
    return {
        "message": f"Application {status} successfully",
        "applicant_email": seeker.email,
        "applicant_phone": profile.phone_number if profile else None,
    }


def ask_question(db: Session, employer: User, application_id: int, question_text: Optional[str]) -> EmployerQuestion:
    """Append an employer follow-up question to an application and notify the seeker."""
    if not _has_text(question_text):
        raise ValidationError("Question text cannot be empty")

    application = (
        db.query(Application)
        .join(Job, Job.id == Application.job_id)
        .filter(Application.id == application_id, Job.employer_id == employer.id)
        .first()
    )
    if not application:
        raise NotFoundError("Application not found or unauthorized")

    question = EmployerQuestion(
        application_id=application.id,
        employer_id=employer.id,
        question_text=question_text.strip(),
    )
    db.add(question)
    notification_service.notify(
        db,
        user_id=application.seeker_id,
        title="New Question from Employer",
        message=f'The employer for "{application.job.title}" has asked you a new question. Please check your applications.',
        type="info",
        related_application_id=application.id,
    )
    db.commit()
    db.refresh(question)
    logger.info(f"Employer question asked: question_id={question.id}, application_id={application.id}")
    return question


def answer_question(db: Session, seeker: User, question_id: int, answer_text: Optional[str]) -> SeekerAnswer:
    """Record the seeker's single answer to a follow-up question and notify the employer."""
    if not _has_text(answer_text):
        raise ValidationError("Answer text cannot be empty")

    question = (
        db.query(EmployerQuestion)
        .join(Application, Application.id == EmployerQuestion.application_id)
        .filter(EmployerQuestion.id == question_id, Application.seeker_id == seeker.id)
        .first()
    )
    if not question:
        raise NotFoundError("Question not found or unauthorized")

    already = db.query(SeekerAnswer.id).filter(
        SeekerAnswer.question_id == question.id,
        SeekerAnswer.seeker_id == seeker.id,
    ).first()
    if already:
        raise ConflictError("You have already answered this question.")

    application = question.application
    answer = SeekerAnswer(
        question_id=question.id,
        seeker_id=seeker.id,
        answer_text=answer_text.strip(),
    )
    db.add(answer)
    notification_service.notify(
        db,
        user_id=application.job.employer_id,
        title="New Answer from Applicant",
        message=f'An applicant for "{application.job.title}" has answered your question.',
        type="info",
        related_application_id=application.id,
    )
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("You have already answered this question.")
    db.refresh(answer)
    logger.info(f"Seeker answer recorded: question_id={question.id}, seeker_id={seeker.id}")
    return answer


def _thread(application: Application) -> List[ThreadQuestionResponse]:
    thread = []
    for question in application.employer_questions:
        answer = question.answers[0] if question.answers else None
        thread.append(ThreadQuestionResponse(
            id=question.id,
            question_text=question.question_text,
            asked_at=question.asked_at,
            answer_text=answer.answer_text if answer else None,
            answered_at=answer.answered_at if answer else None,
        ))
    return thread


def list_seeker_applications(db: Session, seeker_id: int) -> List[SeekerApplicationResponse]:
    """The seeker's applications, newest first, with the follow-up thread."""
    rows = (
        db.query(Application, Job.title, EmployerProfile.company_name)
        .join(Job, Job.id == Application.job_id)
        .outerjoin(EmployerProfile, EmployerProfile.user_id == Job.employer_id)
        .filter(Application.seeker_id == seeker_id)
        .order_by(Application.application_date.desc(), Application.id.desc())
        .all()
    )
    return [
        SeekerApplicationResponse(
            id=application.id,
            job_id=application.job_id,
            seeker_id=application.seeker_id,
            resume_id=application.resume_id,
            status=application.status,
            application_date=application.application_date,
            status_updated_at=application.status_updated_at,
            employer_notes=application.employer_notes,
            job_title=job_title,
            company_name=company_name,
            questions=_thread(application),
        )
        for application, job_title, company_name in rows
    ]


def list_job_applications(db: Session, employer_id: int, job_id: int) -> List[EmployerApplicationResponse]:
    """
    Applications to one of the employer's jobs, newest first.

    Each entry carries the applicant's contact details, the resume, the
    screening answers and the follow-up thread.
    """
    job = db.query(Job.id).filter(Job.id == job_id, Job.employer_id == employer_id).first()
    if not job:
        raise NotFoundError("Job not found")

    rows = (
        db.query(Application, User.email, JobSeekerProfile)
        .join(User, User.id == Application.seeker_id)
        .outerjoin(JobSeekerProfile, JobSeekerProfile.user_id == Application.seeker_id)
        .filter(Application.job_id == job_id)
        .order_by(Application.application_date.desc(), Application.id.desc())
        .all()
    )

    results = []
    for application, email, profile in rows:
        resume = application.resume
        answers = sorted(application.answers, key=lambda a: (a.question.question_order, a.question_id))
        results.append(EmployerApplicationResponse(
            id=application.id,
            job_id=application.job_id,
            seeker_id=application.seeker_id,
            status=application.status,
            application_date=application.application_date,
            status_updated_at=application.status_updated_at,
            employer_notes=application.employer_notes,
            applicant_email=email,
            applicant_name=profile.name if profile else None,
            applicant_location=profile.location if profile else None,
            applicant_phone=profile.phone_number if profile else None,
            education=profile.education if profile else None,
            resume_id=resume.id if resume else None,
            resume_title=resume.title if resume else None,
            resume_url=resume.file_url if resume else None,
            answers=[
                ScreeningAnswerResponse(
                    question_id=answer.question_id,
                    question_text=answer.question.question_text,
                    answer_text=answer.answer_text,
                )
                for answer in answers
            ],
            questions=_thread(application),
        ))
    return results
