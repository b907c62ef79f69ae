"""
Shared fixtures: an in-memory database per test, the app wired to it, and
helpers for signing users up and posting jobs through the API.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import jobnest.core.security as security
from jobnest.db.init_db import init_db
from jobnest.db.session import build_engine, get_db
from jobnest.main import create_app
from jobnest.services import account_service, application_service
from jobnest.services.payment_service import PaymentGateway
from jobnest.services.storage import LocalBlobStore

SIGNING_SECRET = "test-signing-secret"
PDF_BYTES = b"%PDF-1.4\n1 0 obj<<>>endobj\ntrailer<<>>\n%%EOF"


class FakeGateway(PaymentGateway):
    """Gateway that hands out sequential order ids without network access."""

    def __init__(self, signing_secret: str = SIGNING_SECRET):
        super().__init__(signing_secret)
        self.orders = []

    def create_order(self, amount, currency, receipt, notes):
        order = {
            "id": f"order_{len(self.orders) + 1}",
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "status": "created",
        }
        self.orders.append({**order, "notes": notes})
        return order


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Lower the bcrypt cost so the suite does not spend seconds hashing."""
    monkeypatch.setattr(security, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for assertions against the database the app writes to."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def blob_store(tmp_path):
    return LocalBlobStore(str(tmp_path / "uploads"), "/uploads")


@pytest.fixture
def client(session_factory, blob_store, gateway):
    app = create_app(blob_store=blob_store, payment_gateway=gateway)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


class _NoMatch:
    """Query stand-in whose lookups find nothing."""

    def filter(self, *criteria):
        return self

    def first(self):
        return None


@pytest.fixture
def skip_duplicate_check(monkeypatch):
    """
    Make db.query(column) find nothing, as when a concurrent request commits
    the same row right after the duplicate lookup ran.
    """
    def _skip(db, column):
        real_query = db.query

        def query(*entities):
            if len(entities) == 1 and entities[0] is column:
                return _NoMatch()
            return real_query(*entities)

        monkeypatch.setattr(db, "query", query)

    return _skip


@pytest.fixture
def require_activation(monkeypatch):
    """Seekers register unpaid and must activate before applying."""
    monkeypatch.setattr(account_service, "REQUIRE_SEEKER_ACTIVATION", True)
    monkeypatch.setattr(application_service, "REQUIRE_SEEKER_ACTIVATION", True)


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def signup(client):
    """
    Register a user and return bearer headers for them.

    The session cookie is dropped so tests can switch between users by
    header alone.
    """
    def _signup(email: str, role: str = "job_seeker", password: str = "pw123456") -> dict:
        response = client.post("/auth/register", json={"email": email, "password": password, "role": role})
        assert response.status_code == 201, response.text
        token = response.cookies.get("auth-token")
        client.cookies.clear()
        return auth_headers(token)

    return _signup


@pytest.fixture
def seeker(client, signup):
    """Seeker with a completed profile and one default resume."""
    headers = signup("seeker@example.com")
    response = client.post(
        "/seeker/profile",
        json={"name": "Asha Rao", "location": "Pune", "education": "B.Tech", "phone_number": "+91 98765 43210"},
        headers=headers,
    )
    assert response.status_code == 200, response.text
    response = client.post(
        "/seeker/resumes",
        files={"file": ("asha.pdf", PDF_BYTES, "application/pdf")},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return {"headers": headers, "resume_id": response.json()["resume"]["id"]}


@pytest.fixture
def employer(client, signup):
    headers = signup("hiring@acme.example.com", role="employer")
    response = client.post(
        "/employer/profile",
        json={"company_name": "Acme", "location": "Berlin", "industry": "Software"},
        headers=headers,
    )
    assert response.status_code == 200, response.text
    return {"headers": headers}


@pytest.fixture
def post_job(client, employer):
    def _post_job(title: str = "Backend Engineer", **fields) -> dict:
        payload = {
            "title": title,
            "description": "Build and run our APIs.",
            "contact_email": "jobs@acme.example.com",
        }
        payload.update(fields)
        response = client.post("/employer/jobs", json=payload, headers=employer["headers"])
        assert response.status_code == 201, response.text
        return response.json()

    return _post_job
