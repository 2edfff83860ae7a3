"""
NexParcel Backend — Payment Service
=====================================

What:  Turns a booking price into a payment intent.
How:   price → to_minor_units() → provider.create_payment_intent(amount, currency).
"""

import logging
from decimal import Decimal
from typing import Optional

from nexparcel.config import settings
from nexparcel.schemas.payment import PaymentIntentResponse
from nexparcel.services.payment_base import PaymentProvider, to_minor_units
from nexparcel.services.stripe_service import StripePaymentService

logger = logging.getLogger(__name__)


class PaymentService:

    def __init__(self, provider: PaymentProvider, currency: Optional[str] = None):
        self.provider = provider
        self._currency = currency

    @property
    def currency(self) -> str:
        return self._currency or settings.payment_currency

    async def create_intent(self, price: Decimal) -> PaymentIntentResponse:
        """
        Raises:
            PaymentProviderError: provider failure (propagated, no retry)
        """
        amount = to_minor_units(price)
        logger.debug("Creating payment intent: price=%s amount=%d", price, amount)
        client_secret = await self.provider.create_payment_intent(amount, self.currency)
        return PaymentIntentResponse(client_secret=client_secret)


payment_service = PaymentService(StripePaymentService())


def get_payment_service() -> PaymentService:
    """FastAPI dependency; tests swap it via app.dependency_overrides."""
    return payment_service
