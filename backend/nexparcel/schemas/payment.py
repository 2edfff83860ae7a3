"""
NexParcel Backend — Payment Schemas
=====================================

What:  Request/response for POST /create-payment-intent.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PaymentIntentRequest(BaseModel):
    """Price in major currency units (e.g. dollars)."""
    model_config = ConfigDict(extra="ignore")

    price: Decimal = Field(description="Amount to charge, e.g. 19.99")


class PaymentIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret", description="Secret for confirming the payment client-side")
