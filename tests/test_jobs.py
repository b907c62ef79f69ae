"""
Tests for job posting, the public listing and its filters.
"""
import pytest

from jobnest.services.job_service import salary_floor


@pytest.mark.parametrize("salary,expected", [
    ("$90000 - $120000", 90000),
    ("₹12,00,000 - ₹15,00,000", 12),
    ("Competitive", None),
    (None, None),
    ("0 - 5000", 0),
])
def test_salary_floor(salary, expected):
    assert salary_floor(salary) == expected


def test_create_job_with_questions(client, post_job):
    job = post_job(customQuestions=[
        {"text": "Years of experience?", "isRequired": True},
        {"text": "   ", "isRequired": True},
        {"text": "Notice period?"},
    ])

    assert job["is_open"] is True
    questions = client.get(f"/jobs/{job['id']}/questions").json()
    assert [q["question_text"] for q in questions] == ["Years of experience?", "Notice period?"]
    # A skipped blank question leaves a gap in the numbering
    assert [q["question_order"] for q in questions] == [1, 3]
    assert [q["is_required"] for q in questions] == [True, False]


def test_create_job_requires_title_and_description(client, employer):
    response = client.post(
        "/employer/jobs",
        json={"title": "", "description": "x", "contact_email": "jobs@acme.example.com"},
        headers=employer["headers"],
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Job title and description are required"}


def test_create_job_requires_contact_email(client, employer):
    response = client.post(
        "/employer/jobs",
        json={"title": "Backend Engineer", "description": "x"},
        headers=employer["headers"],
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Contact email is required"}


def test_seeker_cannot_post_jobs(client, signup):
    headers = signup("s@example.com")

    response = client.post(
        "/employer/jobs",
        json={"title": "T", "description": "D", "contact_email": "c@example.com"},
        headers=headers,
    )

    assert response.status_code == 401


def test_toggle_hides_job_from_listing(client, employer, post_job):
    job = post_job()

    response = client.post(f"/employer/jobs/{job['id']}/toggle", headers=employer["headers"])
    assert response.status_code == 200
    assert response.json()["is_open"] is False
    assert client.get("/jobs").json()["total"] == 0

    response = client.post(f"/employer/jobs/{job['id']}/toggle", headers=employer["headers"])
    assert response.json()["is_open"] is True
    assert client.get("/jobs").json()["total"] == 1


def test_toggle_other_employers_job_is_not_found(client, signup, post_job):
    job = post_job()
    other = signup("other@acme.example.com", role="employer")

    response = client.post(f"/employer/jobs/{job['id']}/toggle", headers=other)

    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


def test_update_job(client, employer, post_job):
    job = post_job()

    response = client.put(
        f"/employer/jobs/{job['id']}",
        json={"salary": "$100000", "is_remote": True},
        headers=employer["headers"],
    )

    assert response.status_code == 200
    data = response.json()
    assert data["salary"] == "$100000"
    assert data["is_remote"] is True
    assert data["title"] == "Backend Engineer"


def test_job_detail_includes_company_and_questions(client, post_job):
    job = post_job(customQuestions=[{"text": "Why us?", "isRequired": False}])

    response = client.get(f"/jobs/{job['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["company_name"] == "Acme"
    assert [q["question_text"] for q in data["questions"]] == ["Why us?"]


def test_job_detail_not_found(client):
    response = client.get("/jobs/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


def test_listing_filters(client, post_job):
    post_job("Backend Engineer", location="Berlin", salary="$90000 - $120000", job_type="Full-time", domain="Engineering")
    post_job("Data Analyst", location="Pune", salary="₹800000", job_type="Part-time", domain="Data", is_remote=True)
    post_job("Designer", location="Berlin", salary="Competitive", job_type="Contract", domain="Design")

    def titles(**params):
        return sorted(j["title"] for j in client.get("/jobs", params=params).json()["jobs"])

    assert titles() == ["Backend Engineer", "Data Analyst", "Designer"]
    assert titles(q="backend") == ["Backend Engineer"]
    assert titles(q="acme") == ["Backend Engineer", "Data Analyst", "Designer"]
    assert titles(location="berlin") == ["Backend Engineer", "Designer"]
    assert titles(remote="true") == ["Data Analyst"]
    assert titles(type="full") == ["Backend Engineer"]
    assert titles(type="All Types") == ["Backend Engineer", "Data Analyst", "Designer"]
    assert titles(domain="All Domains", location="Berlin") == ["Backend Engineer", "Designer"]
    assert titles(currency="₹") == ["Data Analyst"]
    assert titles(currency="any") == ["Backend Engineer", "Data Analyst", "Designer"]
    # Jobs without a number in the salary never match a minimum
    assert titles(min_salary=100000) == ["Data Analyst"]
    assert titles(min_salary=50000, location="Berlin") == ["Backend Engineer"]


def test_listing_filters_treat_wildcards_literally(client, post_job):
    post_job("Backend Engineer", location="Berlin", salary="$90000")
    post_job("Growth Lead", location="Remote_EU", salary="10% equity")

    def titles(**params):
        return sorted(j["title"] for j in client.get("/jobs", params=params).json()["jobs"])

    assert titles(currency="%") == ["Growth Lead"]
    assert titles(currency="_") == []
    assert titles(location="_") == ["Growth Lead"]
    assert titles(q="%") == []


def test_listing_pagination(client, post_job):
    for i in range(12):
        post_job(f"Job {i}")

    first = client.get("/jobs").json()
    second = client.get("/jobs", params={"page": 2}).json()

    assert first["total"] == 12
    assert first["total_pages"] == 2
    assert first["page_size"] == 10
    assert len(first["jobs"]) == 10
    assert len(second["jobs"]) == 2
    # Newest first
    assert first["jobs"][0]["title"] == "Job 11"
    assert second["jobs"][-1]["title"] == "Job 0"


def test_listing_rejects_page_zero(client):
    response = client.get("/jobs", params={"page": 0})

    assert response.status_code == 400
    assert "error" in response.json()


def test_employer_dashboard(client, employer, post_job, seeker):
    job = post_job()
    post_job("Closed role")
    closed_id = client.get("/jobs").json()["jobs"][0]["id"]
    client.post(f"/employer/jobs/{closed_id}/toggle", headers=employer["headers"])
    client.post(f"/jobs/{job['id']}/apply", json={"resumeId": seeker["resume_id"]}, headers=seeker["headers"])

    response = client.get("/employer/dashboard", headers=employer["headers"])

    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["company_name"] == "Acme"
    assert data["stats"] == {
        "total_jobs": 2,
        "active_jobs": 1,
        "total_applications": 1,
        "pending_applications": 1,
    }
    counts = {j["title"]: j["application_count"] for j in data["jobs"]}
    assert counts == {"Backend Engineer": 1, "Closed role": 0}
