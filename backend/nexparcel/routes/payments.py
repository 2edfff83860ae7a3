"""
NexParcel Backend — Payment Route
===================================

What:  POST /create-payment-intent. Starts a card payment for a booking.
How:   {"price": 12.5} → 1250 minor units → Stripe PaymentIntent →
       {"clientSecret": "..."} for the client to confirm the card.
"""

from fastapi import APIRouter, Depends

from nexparcel.routes import POLICY
from nexparcel.schemas.common import ErrorResponse
from nexparcel.schemas.payment import PaymentIntentRequest, PaymentIntentResponse
from nexparcel.services.payment_service import PaymentService, get_payment_service

router = APIRouter(tags=["Payments"], dependencies=POLICY)


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    responses={502: {"description": "Payment provider failed", "model": ErrorResponse}},
    summary="Create a payment intent",
)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    payments: PaymentService = Depends(get_payment_service),
) -> PaymentIntentResponse:
    return await payments.create_intent(payload.price)
