"""
NexParcel Backend — Stripe Payment Provider
=============================================

What:  PaymentProvider backed by Stripe PaymentIntents.
How:   Calls the Stripe SDK (blocking HTTP) in a worker thread so the event
       loop keeps serving other requests. Card is the only payment method.
Who:   PaymentService, health check.

Error Handling:
    Any stripe.StripeError (card/amount validation, auth, network) becomes
    PaymentProviderError → 502. The Stripe message is logged; the client
    gets Stripe's user_message when there is one.
"""

import asyncio
import logging
from typing import Optional

import stripe

from nexparcel.config import settings
from nexparcel.exceptions import PaymentProviderError
from nexparcel.services.payment_base import PaymentProvider

logger = logging.getLogger(__name__)


class StripePaymentService(PaymentProvider):
    """Creates card PaymentIntents with the configured secret key."""

    PAYMENT_METHOD_TYPES = ["card"]

    def __init__(self, api_key: Optional[str] = None):
        self._api_key = api_key

    @property
    def api_key(self) -> str:
        return self._api_key or settings.stripe_secret_key

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def create_payment_intent(self, amount: int, currency: str) -> str:
        if not self.is_configured():
            raise PaymentProviderError(
                message="Payment provider is not configured",
                context={"setting": "STRIPE_SECRET_KEY"},
            )

        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.create,
                api_key=self.api_key,
                amount=amount,
                currency=currency,
                payment_method_types=self.PAYMENT_METHOD_TYPES,
            )
        except stripe.StripeError as e:
            logger.error(
                "Stripe rejected payment intent (amount=%d %s): %s",
                amount,
                currency,
                str(e),
            )
            raise PaymentProviderError(
                message=getattr(e, "user_message", None) or "Payment provider rejected the request",
                context={"amount": amount, "currency": currency, "error_type": type(e).__name__},
            )

        logger.info("Payment intent %s created (amount=%d %s)", intent.id, amount, currency)
        return intent.client_secret
