"""
SuperApp Backend — Preference Route Handlers
==============================================

What:  Read, set and cycle the sidebar display mode.
How:   Persistence is injected as a PreferenceStore (database-backed by
       default), so the rules in PreferenceService stay storage-agnostic.
Who:   Called by the frontend layout on load and by the sidebar toggle.

Guests can read (they always get "expanded") but not write.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from superapp.auth import Identity, get_identity, require_identity
from superapp.schemas.common import ErrorResponse
from superapp.schemas.preferences import SidebarPreference
from superapp.services.preference_service import (
    PreferenceStore,
    get_preference_store,
    preference_service,
)

router = APIRouter(prefix="/api/preferences", tags=["Preferences"])


@router.get("/sidebar", response_model=SidebarPreference, summary="Get the sidebar mode")
async def get_sidebar_mode(
    identity: Optional[Identity] = Depends(get_identity),
    store: PreferenceStore = Depends(get_preference_store),
) -> SidebarPreference:
    mode = await preference_service.get_sidebar_mode(
        store, identity.id if identity else None
    )
    return SidebarPreference(mode=mode)


@router.put(
    "/sidebar",
    response_model=SidebarPreference,
    responses={400: {"description": "Unknown mode", "model": ErrorResponse}},
    summary="Set the sidebar mode",
)
async def set_sidebar_mode(
    payload: SidebarPreference,
    identity: Identity = Depends(require_identity),
    store: PreferenceStore = Depends(get_preference_store),
) -> SidebarPreference:
    mode = await preference_service.set_sidebar_mode(store, identity.id, payload.mode)
    return SidebarPreference(mode=mode)


@router.post(
    "/sidebar/cycle",
    response_model=SidebarPreference,
    summary="Advance the sidebar mode",
    description="expanded → icons → hidden → expanded",
)
async def cycle_sidebar_mode(
    identity: Identity = Depends(require_identity),
    store: PreferenceStore = Depends(get_preference_store),
) -> SidebarPreference:
    mode = await preference_service.cycle_sidebar_mode(store, identity.id)
    return SidebarPreference(mode=mode)
