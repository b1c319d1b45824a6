"""SQLAlchemy ORM models for CalcHub.

Tables:
- state_entries: key/value blobs backing favorites and history when
  `state_backend = "sql"` (one row per `<client>:<namespace>:<kind>` key)
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from .db import Base


class StateEntry(Base):
    """One persisted JSON document per storage key."""
    __tablename__ = "state_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
