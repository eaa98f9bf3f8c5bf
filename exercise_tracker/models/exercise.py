"""Exercise ORM — one logged activity for a user.

Invariants:
    - Always belongs to a User (user_id FK, indexed for log queries)
    - duration is whole minutes
    - date is a calendar date (no time-of-day component)

Design Decisions:
    - Date column over DateTime: from/to filters compare calendar days inclusively
    - created_at breaks ties between exercises on the same date (stable log order)
    - `import datetime as dt`: the `date` attribute would otherwise shadow the type
"""

import datetime as dt
import uuid

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise entity — description, duration and date logged against a user."""
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )

    user: Mapped["User"] = relationship("User", back_populates="exercises")
