"""
SuperApp Backend — Preference & Identity Schemas
==================================================
"""

import uuid
from typing import Literal, Optional

from pydantic import BaseModel

SidebarMode = Literal["expanded", "icons", "hidden"]


class SidebarPreference(BaseModel):
    mode: SidebarMode


class UserInfo(BaseModel):
    id: uuid.UUID
    email: Optional[str] = None


class SessionResponse(BaseModel):
    """GET /api/auth/me."""
    authenticated: bool
    user: Optional[UserInfo] = None
