"""
Request dependencies for collaborators built once in create_app().
"""
from fastapi import Request

from jobnest.services.storage import BlobStore
from jobnest.services.payment_service import PaymentGateway


def get_blob_store(request: Request) -> BlobStore:
    return request.app.state.blob_store


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway
