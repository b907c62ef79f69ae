"""
Tests for seeker and employer profile upserts.
"""
from sqlalchemy.orm import Session

from jobnest.db.models import JobSeekerProfile


def test_seeker_profile_create_then_update(client, db: Session, signup):
    headers = signup("p@example.com")
    assert client.get("/seeker/profile", headers=headers).json() is None

    response = client.post("/seeker/profile", json={
        "name": "Asha",
        "location": "Pune",
        "education": "B.Tech",
        "job_preferences": {"domains": ["Data"], "remote": True, "salary_min": 50000, "shift": "day"},
    }, headers=headers)
    assert response.status_code == 200
    assert response.json()["job_preferences"] == {
        "domains": ["Data"], "remote": True, "salary_min": 50000, "shift": "day",
    }

    response = client.post("/seeker/profile", json={
        "name": "Asha R",
        "location": "Mumbai",
        "education": "M.Tech",
    }, headers=headers)
    assert response.status_code == 200
    assert response.json()["location"] == "Mumbai"
    assert db.query(JobSeekerProfile).count() == 1


def test_seeker_profile_required_fields(client, signup):
    headers = signup("p@example.com")

    response = client.post("/seeker/profile", json={"name": "Asha", "location": " "}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Name, location, and education are required"}


def test_employer_profile_required_fields(client, signup):
    headers = signup("e@example.com", role="employer")

    response = client.post("/employer/profile", json={"company_name": "Acme"}, headers=headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Location is required"}

    response = client.post("/employer/profile", json={"company_name": "Acme", "location": "Berlin"}, headers=headers)
    assert response.json() == {"error": "Industry is required"}

    response = client.post("/employer/profile", json={"location": "Berlin"}, headers=headers)
    assert response.json() == {"error": "Company name is required"}


def test_employer_profile_roundtrip(client, employer):
    response = client.get("/employer/profile", headers=employer["headers"])

    assert response.status_code == 200
    assert response.json()["company_name"] == "Acme"


def test_profiles_are_role_gated(client, signup):
    seeker = signup("s@example.com")
    employer = signup("e@example.com", role="employer")

    assert client.get("/employer/profile", headers=seeker).status_code == 401
    assert client.get("/seeker/profile", headers=employer).status_code == 401
