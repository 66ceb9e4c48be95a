"""
SuperApp Backend — Shared Column Mixins
=========================================

What:  Columns every owner-scoped table carries: UUID primary key, owning
       user id, and creation timestamp.
How:   Declarative mixin; SQLAlchemy copies the mapped columns into each
       subclass table.

Owner scoping:
    Every read, update and delete in the services filters on `user_id`
    in addition to any record id. A row is only ever visible to the
    identity that created it.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column


class OwnedRecordMixin:
    """Primary key, owner and creation timestamp for per-user records."""

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        index=True,
        comment="Owning identity (subject of the session token)",
    )

    # All storage in UTC; conversion to local time happens in the client
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )
