"""
SuperApp Backend — Session Route Handlers
===========================================

What:  Who am I, and sign out.
Who:   Called by the frontend header (user menu) on every page load.

Sign-up, sign-in and token refresh belong to the external identity provider;
this API only reads the session it issued.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from superapp.auth import Identity, get_identity, identity_provider
from superapp.schemas.preferences import SessionResponse, UserInfo

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get("/me", response_model=SessionResponse, summary="Current session")
async def current_session(
    identity: Optional[Identity] = Depends(get_identity),
) -> SessionResponse:
    if identity is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(
        authenticated=True, user=UserInfo(id=identity.id, email=identity.email)
    )


@router.post("/signout", status_code=204, response_class=Response, summary="Sign out")
async def sign_out(response: Response) -> None:
    """Clears the session cookie. Safe to call without a session."""
    identity_provider.sign_out(response)
