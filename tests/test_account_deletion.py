"""
Tests for account deletion and its per-table cleanup report.
"""
from sqlalchemy.orm import Session

from jobnest.db.models import User, Job, Application, Resume, Notification, JobSeekerProfile


def test_delete_seeker_account(client, db: Session, employer, seeker, post_job):
    job = post_job()
    application_id = client.post(
        f"/jobs/{job['id']}/apply", json={"resumeId": seeker["resume_id"]}, headers=seeker["headers"]
    ).json()["application_id"]
    client.patch(f"/employer/applications/{application_id}", json={"status": "accepted"}, headers=employer["headers"])

    response = client.post("/auth/delete-account", headers=seeker["headers"])

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Account deleted"
    cleanup = {step["table"]: step for step in data["cleanup"]}
    assert list(cleanup) == [
        "applications", "jobs", "resumes", "notifications", "job_seeker_profiles", "employer_profiles",
    ]
    assert all(step["ok"] for step in data["cleanup"])
    assert cleanup["applications"]["deleted"] == 1
    assert cleanup["resumes"]["deleted"] == 1
    assert cleanup["notifications"]["deleted"] == 1
    assert cleanup["job_seeker_profiles"]["deleted"] == 1
    assert "Max-Age=0" in response.headers["set-cookie"]

    assert db.query(User).filter(User.email == "seeker@example.com").count() == 0
    assert db.query(Application).count() == 0
    assert db.query(Resume).count() == 0
    assert db.query(Notification).count() == 0
    assert db.query(JobSeekerProfile).count() == 0
    # The employer's job is untouched
    assert db.query(Job).count() == 1


def test_deleted_user_credential_stops_working(client, seeker):
    client.post("/auth/delete-account", headers=seeker["headers"])

    response = client.get("/auth/me", headers=seeker["headers"])

    assert response.status_code == 401


def test_delete_employer_removes_jobs(client, db: Session, employer, post_job):
    post_job()
    post_job("Second")

    response = client.post("/auth/delete-account", headers=employer["headers"])

    cleanup = {step["table"]: step for step in response.json()["cleanup"]}
    assert cleanup["jobs"]["deleted"] == 2
    assert cleanup["employer_profiles"]["deleted"] == 1
    assert db.query(Job).count() == 0


def test_delete_account_requires_login(client):
    response = client.post("/auth/delete-account")

    assert response.status_code == 401
