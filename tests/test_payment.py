"""
Tests for account activation: order creation and the signature gate.
"""
import hashlib
import hmac

import pytest
from sqlalchemy.orm import Session

from jobnest.core.errors import ConflictError
from jobnest.db.models import User, Payment
from jobnest.services.payment_service import compute_signature, verify_payment


@pytest.fixture
def unpaid(client, require_activation, signup):
    return signup("unpaid@example.com")


def paid_flag(db: Session) -> bool:
    db.expire_all()
    return db.query(User).filter(User.email == "unpaid@example.com").one().is_paid


def test_compute_signature_matches_hmac_sha256():
    expected = hmac.new(b"secret", b"order_1|pay_1", hashlib.sha256).hexdigest()

    assert compute_signature("secret", "order_1", "pay_1") == expected


def test_create_order(client, gateway, unpaid):
    response = client.post("/payment/create-order", headers=unpaid)

    assert response.status_code == 200
    order = response.json()
    assert order["amount"] == 10000
    assert order["currency"] == "INR"
    assert order["receipt"].startswith("activation_")
    assert gateway.orders[0]["notes"]["purpose"] == "account_activation"


def test_create_order_when_already_paid(client, signup):
    headers = signup("paid@example.com")

    response = client.post("/payment/create-order", headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Account already activated"}


def test_create_order_requires_seeker(client, employer):
    response = client.post("/payment/create-order", headers=employer["headers"])

    assert response.status_code == 401


def test_forged_signature_leaves_user_unpaid(client, db: Session, unpaid):
    order = client.post("/payment/create-order", headers=unpaid).json()

    response = client.post("/payment/verify", json={
        "orderId": order["id"],
        "paymentId": "pay_1",
        "signature": "0" * 64,
    }, headers=unpaid)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid signature"}
    assert paid_flag(db) is False
    assert db.query(Payment).count() == 0


def test_non_ascii_signature_is_rejected(client, db: Session, unpaid):
    order = client.post("/payment/create-order", headers=unpaid).json()

    response = client.post("/payment/verify", json={
        "orderId": order["id"],
        "paymentId": "pay_1",
        "signature": "\u00e9" * 64,
    }, headers=unpaid)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid signature"}
    assert paid_flag(db) is False


def test_signature_bound_to_payment_id(client, db: Session, gateway, unpaid):
    order = client.post("/payment/create-order", headers=unpaid).json()
    signature = compute_signature(gateway.signing_secret, order["id"], "pay_1")

    response = client.post("/payment/verify", json={
        "orderId": order["id"],
        "paymentId": "pay_2",
        "signature": signature,
    }, headers=unpaid)

    assert response.status_code == 400
    assert paid_flag(db) is False


def test_valid_signature_activates_account(client, db: Session, gateway, unpaid):
    order = client.post("/payment/create-order", headers=unpaid).json()

    response = client.post("/payment/verify", json={
        "order_id": order["id"],
        "payment_id": "pay_1",
        "signature": compute_signature(gateway.signing_secret, order["id"], "pay_1"),
    }, headers=unpaid)

    assert response.status_code == 200
    payment = response.json()["payment"]
    assert payment["status"] == "completed"
    assert payment["amount"] == 10000
    assert payment["currency"] == "INR"
    assert paid_flag(db) is True


def test_payment_id_recorded_once(client, gateway, unpaid):
    order = client.post("/payment/create-order", headers=unpaid).json()
    body = {
        "orderId": order["id"],
        "paymentId": "pay_1",
        "signature": compute_signature(gateway.signing_secret, order["id"], "pay_1"),
    }
    assert client.post("/payment/verify", json=body, headers=unpaid).status_code == 200

    response = client.post("/payment/verify", json=body, headers=unpaid)

    assert response.status_code == 409


def test_verify_missing_fields(client, unpaid):
    response = client.post("/payment/verify", json={"orderId": "order_1"}, headers=unpaid)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing payment verification fields"}


def test_concurrent_verify_hits_unique_payment_id(client, db: Session, gateway, unpaid, skip_duplicate_check):
    order = client.post("/payment/create-order", headers=unpaid).json()
    signature = compute_signature(gateway.signing_secret, order["id"], "pay_1")
    client.post("/payment/verify", json={
        "orderId": order["id"],
        "paymentId": "pay_1",
        "signature": signature,
    }, headers=unpaid)
    user = db.query(User).filter(User.email == "unpaid@example.com").one()
    skip_duplicate_check(db, Payment.id)

    with pytest.raises(ConflictError, match="Payment already recorded"):
        verify_payment(db, gateway, user, order["id"], "pay_1", signature)

    assert db.query(Payment).count() == 1
