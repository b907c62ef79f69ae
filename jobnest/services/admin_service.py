"""
Site-wide counts for the admin dashboard.
"""
from sqlalchemy import func, case
from sqlalchemy.orm import Session

from jobnest.db.models import User, Job, Application
from jobnest.db.models.user import ROLE_JOB_SEEKER, ROLE_EMPLOYER
from jobnest.db.models.application import APPLICATION_STATUSES


def _count_if(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


def stats(db: Session) -> dict:
    users, seekers, employers, paid = db.query(
        func.count(User.id),
        _count_if(User.role == ROLE_JOB_SEEKER),
        _count_if(User.role == ROLE_EMPLOYER),
        _count_if(User.is_paid.is_(True)),
    ).one()

    jobs, open_jobs = db.query(
        func.count(Job.id),
        _count_if(Job.is_open.is_(True)),
    ).one()

    by_status = dict.fromkeys(APPLICATION_STATUSES, 0)
    for status, count in db.query(Application.status, func.count(Application.id)).group_by(Application.status):
        by_status[status] = count

    return {
        "users": {
            "total": users,
            "job_seekers": int(seekers),
            "employers": int(employers),
            "paid": int(paid),
        },
        "jobs": {"total": jobs, "open": int(open_jobs)},
        "applications": {"total": sum(by_status.values()), "by_status": by_status},
    }
