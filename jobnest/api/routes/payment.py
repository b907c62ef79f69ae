"""
Account activation checkout.

create-order asks the gateway for an order; verify checks the signature the
checkout page posts back and activates the account.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobnest.db.session import get_db
from jobnest.db.models.user import User
from jobnest.api.dependencies import get_payment_gateway
from jobnest.core.auth_dependency import require_seeker
from jobnest.schemas.payment import OrderResponse, VerifyPaymentRequest, VerifyPaymentResponse
from jobnest.services import payment_service
from jobnest.services.payment_service import PaymentGateway

router = APIRouter(prefix="/payment", tags=["Payment"])


@router.post("/create-order", response_model=OrderResponse)
def create_order(
    current_user: User = Depends(require_seeker),
    gateway: PaymentGateway = Depends(get_payment_gateway)
):
    return payment_service.create_order(gateway, current_user)


@router.post("/verify", response_model=VerifyPaymentResponse)
def verify_payment(
    payload: VerifyPaymentRequest,
    current_user: User = Depends(require_seeker),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    db: Session = Depends(get_db)
):
    payment = payment_service.verify_payment(
        db,
        gateway,
        current_user,
        payload.order_id,
        payload.payment_id,
        payload.signature,
    )
    return {"message": "Payment verified successfully", "payment": payment}
