"""
SuperApp Backend — Session Identity
=====================================

What:  Verifies the session token issued by the identity provider and turns it
       into an `Identity` (user id + email), or into no identity at all.
How:   The token arrives as `Authorization: Bearer <jwt>` or in the session
       cookie. It is verified as an HS256 JWT with the configured secret and
       audience; `sub` must be a UUID.
Who:   `get_identity` is a FastAPI dependency used by page endpoints (guest
       allowed); `require_identity` is used by every mutation and owner-only read.

Failure semantics:
    A missing, expired or invalid token is NOT an error at this layer. It
    yields "no identity". Endpoints that need an identity raise
    AuthenticationRequiredError (401 "Not authenticated") before any store
    access; page endpoints fall back to the guest data source.

Usage:
    @router.post("/contacts")
    async def create(payload: ContactInput, identity: Identity = Depends(require_identity)):
        ...
"""

import logging
import uuid
from typing import Optional

from fastapi import Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from superapp.config import settings
from superapp.exceptions import AuthenticationRequiredError

logger = logging.getLogger(__name__)

bearer_optional = HTTPBearer(auto_error=False)


class Identity(BaseModel):
    """The authenticated caller."""
    id: uuid.UUID
    email: Optional[str] = None


class SessionIdentityProvider:
    """
    Verifies provider-issued session tokens.

    The provider itself (sign-up, password reset, token refresh) is external;
    this class only checks signatures and reads claims.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: Optional[str] = "authenticated",
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.audience = audience

    def get_current_user(self, token: Optional[str]) -> Optional[Identity]:
        """Return the identity carried by `token`, or None when it is absent or invalid."""
        if not token or not self.secret:
            return None

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
            )
        except ExpiredSignatureError:
            logger.info("Session token has expired; treating caller as guest")
            return None
        except JWTError as e:
            logger.warning("Session token rejected: %s", str(e))
            return None

        subject = payload.get("sub")
        try:
            user_id = uuid.UUID(str(subject))
        except ValueError:
            logger.warning("Session token has malformed subject: %r", subject)
            return None

        return Identity(id=user_id, email=payload.get("email"))

    def sign_out(self, response: Response) -> None:
        """Clear the session cookie. Tokens already issued expire on their own."""
        response.delete_cookie(settings.session_cookie_name, path="/")


# Singleton instance
identity_provider = SessionIdentityProvider(
    secret=settings.auth_jwt_secret,
    algorithm=settings.auth_jwt_algorithm,
    audience=settings.auth_jwt_audience,
)


# ── FastAPI Dependencies ──────────────────────────────────────────────────

async def get_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_optional),
) -> Optional[Identity]:
    """Resolve the caller's identity, or None for guests."""
    token = credentials.credentials if credentials else request.cookies.get(
        settings.session_cookie_name
    )
    return identity_provider.get_current_user(token)


async def require_identity(
    identity: Optional[Identity] = Depends(get_identity),
) -> Identity:
    """Resolve the caller's identity or fail with 401 "Not authenticated"."""
    if identity is None:
        raise AuthenticationRequiredError()
    return identity
