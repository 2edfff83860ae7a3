"""
NexParcel Backend — Authorization Gate
========================================

What:  Router-level dependency enforcing ROUTE_POLICY on every request.
How:   1. Resolve the matched route's path template and method
       2. Look up the required access; public routes pass straight through
       3. Read the token from Authorization ("Bearer <jwt>" or the bare
          jwt) and verify it → 401 on any failure
       4. For role-restricted routes, load the user by the token's email
          and compare roles → 403 on mismatch

The decoded claims are stored on `request.state.identity`.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.auth.policy import Access, required_access
from nexparcel.database import get_db_session
from nexparcel.exceptions import AuthenticationError, AuthorizationError
from nexparcel.services.token_service import token_service
from nexparcel.services.user_service import user_service

logger = logging.getLogger(__name__)


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Token from an Authorization header value; accepts a Bearer prefix."""
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, credentials = value.partition(" ")
    if credentials and scheme.lower() == "bearer":
        value = credentials.strip()
    return value or None


def authenticate(request: Request) -> Dict[str, Any]:
    """
    Verify the request's token and return its claims.

    Raises:
        AuthenticationError: no token, or token invalid/expired
    """
    token = extract_token(request.headers.get("Authorization"))
    if token is None:
        raise AuthenticationError(context={"reason": "missing"})
    claims = token_service.decode(token)
    request.state.identity = claims
    return claims


async def authorize(db: AsyncSession, claims: Dict[str, Any], access: Access) -> None:
    """
    Check the caller's stored role against `access`.

    Raises:
        AuthorizationError: user unknown or role differs
    """
    role = access.required_role
    if role is None:
        return
    email = claims.get("email")
    user = await user_service.find_by_email(db, email)
    if user is None or user.role != role:
        logger.warning("Forbidden: %s lacks role %r", email, role)
        raise AuthorizationError(required_role=role, context={"email": email})


async def enforce_policy(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> None:
    """Dependency attached to every domain router (see routes/__init__.py)."""
    route = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    access = required_access(request.method, path)
    if access is None:
        return
    claims = authenticate(request)
    await authorize(db, claims, access)
