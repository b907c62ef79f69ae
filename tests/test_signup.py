"""
Tests for the registration endpoint.
"""
import pytest
from sqlalchemy.orm import Session

from jobnest.core.errors import ConflictError
from jobnest.db.models.user import User
from jobnest.services import account_service


def test_signup_success(client, db: Session):
    """Test successful user registration."""
    response = client.post(
        "/auth/register",
        json={"email": "a@x.com", "password": "pw123456", "role": "job_seeker"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User created successfully"
    assert data["user"]["email"] == "a@x.com"
    assert data["user"]["role"] == "job_seeker"
    assert "password_hash" not in data["user"]

    # Session cookie is set for browsers
    set_cookie = response.headers["set-cookie"]
    assert "auth-token=" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "samesite=lax" in set_cookie.lower()

    user = db.query(User).filter(User.email == "a@x.com").first()
    assert user is not None
    assert user.password_hash != "pw123456"


def test_signup_normalizes_email(client, db: Session):
    response = client.post(
        "/auth/register",
        json={"email": "Mixed.Case@Example.com", "password": "pw123456", "role": "employer"},
    )

    assert response.status_code == 201
    assert db.query(User).filter(User.email == "mixed.case@example.com").count() == 1


def test_signup_duplicate_email(client):
    """Test signup with duplicate email returns 409."""
    payload = {"email": "dup@example.com", "password": "pw123456", "role": "job_seeker"}
    assert client.post("/auth/register", json=payload).status_code == 201

    response = client.post("/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json() == {"error": "User already exists"}


def test_signup_missing_fields(client):
    response = client.post("/auth/register", json={"email": "a@x.com", "password": "pw123456"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_signup_invalid_role(client, db: Session):
    response = client.post(
        "/auth/register",
        json={"email": "boss@example.com", "password": "pw123456", "role": "admin"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid role"}
    assert db.query(User).count() == 0


def test_signup_password_exactly_72_bytes(client):
    response = client.post(
        "/auth/register",
        json={"email": "long@example.com", "password": "a" * 72, "role": "job_seeker"},
    )

    assert response.status_code == 201


def test_signup_password_unicode_over_72_bytes(client):
    """19 four-byte characters are 76 bytes, over bcrypt's limit."""
    response = client.post(
        "/auth/register",
        json={"email": "emoji@example.com", "password": "\U0001F680" * 19, "role": "job_seeker"},
    )

    assert response.status_code == 400
    assert "72 bytes" in response.json()["error"]


def test_signup_everyone_starts_paid_by_default(client, db: Session):
    client.post("/auth/register", json={"email": "s@example.com", "password": "pw123456", "role": "job_seeker"})

    assert db.query(User).filter(User.email == "s@example.com").one().is_paid is True


def test_signup_seeker_unpaid_when_activation_required(client, db: Session, require_activation):
    client.post("/auth/register", json={"email": "s@example.com", "password": "pw123456", "role": "job_seeker"})
    client.post("/auth/register", json={"email": "e@example.com", "password": "pw123456", "role": "employer"})

    assert db.query(User).filter(User.email == "s@example.com").one().is_paid is False
    assert db.query(User).filter(User.email == "e@example.com").one().is_paid is True


def test_signup_concurrent_duplicate_hits_unique_email(client, db: Session, skip_duplicate_check):
    payload = {"email": "dup@example.com", "password": "pw123456", "role": "job_seeker"}
    assert client.post("/auth/register", json=payload).status_code == 201
    skip_duplicate_check(db, User.id)

    with pytest.raises(ConflictError, match="User already exists"):
        account_service.register(db, "dup@example.com", "pw123456", "job_seeker")

    assert db.query(User).count() == 1
