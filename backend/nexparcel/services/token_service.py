"""
NexParcel Backend — Access Token Service
==========================================

What:  Signs and verifies the JWTs carried in the Authorization header.
How:   PyJWT, HS256 with the shared ACCESS_TOKEN_SECRET. Tokens carry the
       identity the client posted to /jwt (at least `email`) plus `iat`
       and `exp` (one hour by default).
Who:   POST /jwt issues tokens; the authorization gate verifies them.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

import jwt

from nexparcel.config import settings
from nexparcel.exceptions import AuthenticationError, NexParcelError, ValidationError

logger = logging.getLogger(__name__)


class TokenService:
    """
    Issues and decodes access tokens.

    Constructor arguments override settings (tests); by default every call
    reads the current settings.
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        ttl: Optional[timedelta] = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    @property
    def secret(self) -> str:
        secret = self._secret or settings.access_token_secret
        if not secret:
            raise NexParcelError(
                message="Token signing is not configured",
                context={"setting": "ACCESS_TOKEN_SECRET"},
            )
        return secret

    @property
    def algorithm(self) -> str:
        return self._algorithm or settings.jwt_algorithm

    @property
    def ttl(self) -> timedelta:
        return self._ttl or timedelta(minutes=settings.access_token_ttl_minutes)

    def issue(self, claims: Mapping[str, Any]) -> str:
        """
        Sign `claims` into a token that expires after `ttl`.

        Raises:
            ValidationError: claims carry no email
        """
        if not claims.get("email"):
            raise ValidationError(message="Token claims must include an email", field="email")

        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = dict(claims)
        payload["iat"] = now
        payload["exp"] = now + self.ttl
        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)
        logger.info("Access token issued for %s", claims["email"])
        return token

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry and return the claims.

        Raises:
            AuthenticationError: expired, tampered, or otherwise invalid token
        """
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired access token")
            raise AuthenticationError(context={"reason": "expired"})
        except jwt.InvalidTokenError as e:
            logger.info("Rejected invalid access token: %s", str(e))
            raise AuthenticationError(context={"reason": "invalid"})


token_service = TokenService()
