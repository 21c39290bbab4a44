from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from toneswap.models.base import Base


class Transformation(Base):
    """One completed rewrite shown in the community feed.

    Rows are append-only: nothing in the app updates or deletes them.
    """

    __tablename__ = "transformations"

    id: Mapped[int] = mapped_column(primary_key=True)

    original_text: Mapped[str] = mapped_column(Text, nullable=False)
    transformed_text: Mapped[str] = mapped_column(Text, nullable=False)

    # Tone code, e.g. "pirate" (see services.tone_catalog.Tone)
    tone: Mapped[str] = mapped_column(String(32), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True, nullable=False)
