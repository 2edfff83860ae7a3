"""
NexParcel Backend — Abstract Payment Provider Interface
=========================================================

What:  Contract for creating payment intents with an external processor.
How:   Concrete providers (StripePaymentService) implement
       create_payment_intent(); PaymentService converts prices and calls it.
Who:   POST /create-payment-intent, GET /health.
"""

from abc import ABC, abstractmethod
from decimal import ROUND_DOWN, Decimal
from typing import Union


def to_minor_units(price: Union[Decimal, int, float, str]) -> int:
    """
    Convert a major-unit price to an integer minor-unit amount.

    Multiplies by 100 and truncates toward zero, so fractional cents are
    dropped (19.999 → 1999). Decimal arithmetic keeps 19.99 → 1999, where
    float math would give 1998.
    """
    amount = Decimal(str(price)) * 100
    return int(amount.to_integral_value(rounding=ROUND_DOWN))


class PaymentProvider(ABC):
    """
    Abstract interface for payment processors.

    Contract:
        - create_payment_intent() takes a minor-unit amount and a currency
          code and returns the client secret for one payment attempt
        - Provider failures are raised as PaymentProviderError; there is
          no retry
    """

    @abstractmethod
    async def create_payment_intent(self, amount: int, currency: str) -> str:
        """
        Args:
            amount:   Amount in minor units (cents for USD)
            currency: ISO 4217 code, lowercase

        Returns:
            The payment intent's client secret

        Raises:
            PaymentProviderError: the provider rejected the request or was unreachable
        """
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """True if credentials are present. Does not call the provider."""
        ...
