"""
Tests for admin statistics and the health probe.
"""
from sqlalchemy.orm import Session

from jobnest.core.security import hash_password, create_access_token
from jobnest.db.models import User


def admin_headers(db: Session) -> dict:
    admin = User(email="admin@example.com", password_hash=hash_password("pw123456"), role="admin", is_paid=True)
    db.add(admin)
    db.commit()
    return {"Authorization": f"Bearer {create_access_token(admin.id, admin.email, admin.role)}"}


def test_stats(client, db: Session, employer, seeker, post_job):
    job = post_job()
    post_job("Second")
    client.post(f"/jobs/{job['id']}/apply", json={"resumeId": seeker["resume_id"]}, headers=seeker["headers"])

    response = client.get("/admin/stats", headers=admin_headers(db))

    assert response.status_code == 200
    data = response.json()
    assert data["users"] == {"total": 3, "job_seekers": 1, "employers": 1, "paid": 3}
    assert data["jobs"] == {"total": 2, "open": 2}
    assert data["applications"]["total"] == 1
    assert data["applications"]["by_status"] == {"applied": 1, "accepted": 0, "rejected": 0, "waitlisted": 0}


def test_stats_forbidden_for_employers(client, employer):
    response = client.get("/admin/stats", headers=employer["headers"])

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_health(client):
    response = client.get("/system/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"
