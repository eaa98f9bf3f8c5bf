"""User ORM — persists the owner of an exercise log.

Invariants:
    - id is UUID primary key (client-side default)
    - username is non-nullable and unique (the store enforces uniqueness)
    - Users are never mutated or deleted through the API

Design Decisions:
    - Unique constraint over a read-then-insert check: concurrent creates cannot
      both succeed (ADR: rely on the store's per-row atomicity)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exercise_tracker.core.coerce_input import USERNAME_MAX_LENGTH
from exercise_tracker.db.base import Base


class User(Base):
    """User entity — owns exercises."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="user", lazy="raise",
    )
