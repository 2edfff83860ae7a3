"""
NexParcel Backend — Token Route
=================================

What:  POST /jwt. Exchanges the signed-in user's identity for an access token.
Who:   Called by the web client right after Firebase sign-in.
"""

from fastapi import APIRouter

from nexparcel.schemas.auth import TokenRequest, TokenResponse
from nexparcel.schemas.common import ErrorResponse
from nexparcel.services.token_service import token_service

router = APIRouter(tags=["Auth"])


@router.post(
    "/jwt",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Issue an access token",
)
async def issue_token(payload: TokenRequest) -> TokenResponse:
    """The posted identity becomes the token's claims; the token expires in one hour."""
    return TokenResponse(token=token_service.issue(payload.model_dump()))
