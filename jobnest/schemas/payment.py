"""
Pydantic schemas for account activation payments.
"""
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


class VerifyPaymentRequest(BaseModel):
    """Gateway callback fields posted by the checkout page."""
    order_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("orderId", "order_id")
    )
    payment_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("paymentId", "payment_id")
    )
    signature: Optional[str] = Field(
        None, validation_alias=AliasChoices("signature", "payment_signature")
    )


class OrderResponse(BaseModel):
    id: str
    amount: int
    currency: str
    receipt: str
    status: Optional[str] = None
    client_secret: Optional[str] = None


class PaymentResponse(BaseModel):
    id: int
    gateway_order_id: str
    gateway_payment_id: str
    status: str
    amount: int
    currency: str

    class Config:
        from_attributes = True


class VerifyPaymentResponse(BaseModel):
    message: str
    payment: PaymentResponse
