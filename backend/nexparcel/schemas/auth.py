"""
NexParcel Backend — Token Schemas
===================================

What:  Request/response models for POST /jwt.

The client posts the signed-in user's identity (at least an email) and
receives a token to send as the Authorization header on protected routes.
"""

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """Identity claims to sign. Extra keys are carried into the token."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=3, description="Email claim used for role lookups")


class TokenResponse(BaseModel):
    token: str = Field(description="Signed access token (expires in one hour)")
