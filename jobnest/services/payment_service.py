"""
Account activation payments.

The gateway creates an order, the checkout page completes it and posts back
the order id, payment id and signature. The signature is an HMAC-SHA256 over
"<order_id>|<payment_id>" with the server's signing secret; only a matching
signature flips the seeker's paid flag.
"""
import hashlib
import hmac
import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

import stripe
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobnest.core.config import ACTIVATION_AMOUNT, ACTIVATION_CURRENCY
from jobnest.core.errors import AppError, ValidationError, ConflictError, StateError
from jobnest.db.models import User, Payment

logger = logging.getLogger(__name__)

ACTIVATION_PURPOSE = "account_activation"


class PaymentGatewayError(AppError):
    """The gateway refused or failed to create an order."""
    status_code = 502
    default_message = "Payment gateway error"


class PaymentGateway(ABC):
    """Order creation plus the secret used to sign completed payments."""

    def __init__(self, signing_secret: str):
        self.signing_secret = signing_secret

    @abstractmethod
    def create_order(self, amount: int, currency: str, receipt: str, notes: dict) -> dict:
        """Return an order descriptor with at least id, amount, currency and receipt."""
        raise NotImplementedError


class StripeGateway(PaymentGateway):
    """A Stripe PaymentIntent stands in for the gateway order."""

    def __init__(self, api_key: Optional[str], signing_secret: str):
        super().__init__(signing_secret)
        self.api_key = api_key
        if not api_key:
            logger.warning("STRIPE_SECRET_KEY not configured - activation payments disabled")

    def create_order(self, amount: int, currency: str, receipt: str, notes: dict) -> dict:
        if not self.api_key:
            raise PaymentGatewayError("Payment gateway not configured")

        try:
            intent = stripe.PaymentIntent.create(
                api_key=self.api_key,
                amount=amount,
                currency=currency.lower(),
                metadata={**{k: str(v) for k, v in notes.items()}, "receipt": receipt},
            )
        except stripe.error.StripeError as e:
            logger.error(f"Stripe error creating order: {e}")
            raise PaymentGatewayError(f"Failed to create order: {str(e)}")

        logger.info(f"Created payment intent: intent_id={intent.id}, receipt={receipt}")
        return {
            "id": intent.id,
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "status": intent.status,
            "client_secret": intent.client_secret,
        }


def compute_signature(secret: str, order_id: str, payment_id: str) -> str:
    message = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def create_order(gateway: PaymentGateway, user: User) -> dict:
    if user.is_paid:
        raise StateError("Account already activated")

    receipt = f"activation_{user.id}_{int(time.time() * 1000)}"
    order = gateway.create_order(
        amount=ACTIVATION_AMOUNT,
        currency=ACTIVATION_CURRENCY,
        receipt=receipt,
        notes={"user_id": user.id, "purpose": ACTIVATION_PURPOSE},
    )
    logger.info(f"Activation order created: user_id={user.id}, order_id={order.get('id')}")
    return order


def verify_payment(
    db: Session,
    gateway: PaymentGateway,
    user: User,
    order_id: Optional[str],
    payment_id: Optional[str],
    signature: Optional[str],
) -> Payment:
    """
    Check the payment signature and activate the account.

    The paid flag and the payment record are committed together. Nothing is
    written when the signature does not match.
    """
    if not order_id or not payment_id or not signature:
        raise ValidationError("Missing payment verification fields")

    if not gateway.signing_secret:
        logger.error("PAYMENT_SIGNING_SECRET not configured - refusing to verify payment")
        raise ValidationError("Invalid signature")

    expected = compute_signature(gateway.signing_secret, order_id, payment_id)
    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        logger.warning(f"Payment signature mismatch: user_id={user.id}, order_id={order_id}")
        raise ValidationError("Invalid signature")

    recorded = db.query(Payment.id).filter(Payment.gateway_payment_id == payment_id).first()
    if recorded:
        raise ConflictError("Payment already recorded")

    user.is_paid = True
    payment = Payment(
        user_id=user.id,
        gateway_order_id=order_id,
        gateway_payment_id=payment_id,
        status="completed",
        amount=ACTIVATION_AMOUNT,
        currency=ACTIVATION_CURRENCY,
    )
    db.add(payment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Payment already recorded")
    db.refresh(payment)
    logger.info(f"Account activated: user_id={user.id}, payment_id={payment_id}")
    return payment
