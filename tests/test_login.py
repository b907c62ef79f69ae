"""
Smoke tests for login, logout and the session credential.
Tests successful login, wrong password, and non-existent user scenarios.
"""
from datetime import timedelta

import pytest
from jose import jwt

from jobnest.core import config
from jobnest.core.security import create_access_token, decode_access_token


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_user(client):
    """Create a test user for login tests."""
    client.post("/auth/register", json={"email": "a@x.com", "password": "pw123456", "role": "job_seeker"})
    client.cookies.clear()
    return {"email": "a@x.com", "password": "pw123456"}


def test_login_success(client, test_user):
    """Test successful login with correct credentials."""
    response = client.post("/auth/login", json=test_user)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"]["email"] == "a@x.com"
    assert response.cookies.get("auth-token")


def test_login_cookie_authenticates_followup_requests(client, test_user):
    client.post("/auth/login", json=test_user)

    response = client.get("/auth/me")

    assert response.status_code == 200
    assert response.json()["email"] == "a@x.com"


def test_login_wrong_password(client, test_user):
    """Test login with wrong password returns 401."""
    response = client.post("/auth/login", json={"email": "a@x.com", "password": "wrong_password_123"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_login_nonexistent_email(client):
    """Unknown email gets the same answer as a wrong password."""
    response = client.post("/auth/login", json={"email": "nobody@example.com", "password": "pw123456"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_login_missing_fields(client):
    response = client.post("/auth/login", json={"email": "a@x.com"})

    assert response.status_code == 400
    assert response.json() == {"error": "Email and password are required"}


def test_logout_clears_cookie_and_redirects(client, test_user):
    client.post("/auth/login", json=test_user)

    response = client.post("/auth/logout", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    set_cookie = response.headers["set-cookie"]
    assert 'auth-token=""' in set_cookie or "auth-token=;" in set_cookie
    assert "Max-Age=0" in set_cookie
    assert client.get("/auth/me").status_code == 401


def test_logout_without_session_is_harmless(client):
    response = client.post("/auth/logout", follow_redirects=False)

    assert response.status_code == 303


def test_me_requires_credential(client):
    response = client.get("/auth/me")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_token_carries_identity_claims():
    token = create_access_token(7, "a@x.com", "employer")
    payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])

    assert payload["userId"] == 7
    assert payload["sub"] == "7"
    assert payload["email"] == "a@x.com"
    assert payload["role"] == "employer"
    assert "exp" in payload


def test_expired_token_is_rejected(client, test_user):
    user_id = client.post("/auth/login", json=test_user).json()["user"]["id"]
    client.cookies.clear()
    expired = create_access_token(user_id, "a@x.com", "job_seeker", expires_delta=timedelta(seconds=-5))

    assert decode_access_token(expired) is None
    assert client.get("/auth/me", headers=auth_headers(expired)).status_code == 401


def test_tampered_token_is_rejected(client, test_user):
    login = client.post("/auth/login", json=test_user)
    token = login.cookies.get("auth-token")
    client.cookies.clear()
    forged = jwt.encode(
        {"sub": "1", "userId": 1, "email": "a@x.com", "role": "admin"},
        "not-the-server-secret",
        algorithm="HS256",
    )

    assert client.get("/auth/me", headers=auth_headers(token)).status_code == 200
    assert client.get("/auth/me", headers=auth_headers(forged)).status_code == 401
    assert client.get("/auth/me", headers=auth_headers(token[:-2] + "xx")).status_code == 401


def test_role_comes_from_live_user_not_token(client, test_user):
    """A token claiming admin does not open admin routes for a seeker."""
    user_id = client.post("/auth/login", json=test_user).json()["user"]["id"]
    client.cookies.clear()
    token = create_access_token(user_id, "a@x.com", "admin")

    response = client.get("/admin/stats", headers=auth_headers(token))

    assert response.status_code == 401
