"""Attendee feedback model – event-wide or aimed at a single team."""

import enum
import json
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hackjudge.database import Base


class Reaction(str, enum.Enum):
    EXCITED = "excited"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    DISAPPOINTED = "disappointed"
    FRUSTRATED = "frustrated"


class FeedbackCategory(str, enum.Enum):
    ORGANIZATION = "organization"
    CONTENT = "content"
    MENTORSHIP = "mentorship"
    NETWORKING = "networking"
    VENUE = "venue"


class Feedback(Base):
    __tablename__ = "feedback"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    event_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    team_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), index=True
    )

    # ── JSON list of {"category", "score", "max_score"} ──
    ratings_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    reaction: Mapped[Reaction] = mapped_column(Enum(Reaction), default=Reaction.NEUTRAL)
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # ── Attendee ──
    is_anonymous: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    attendee_name: Mapped[Optional[str]] = mapped_column(String(200))
    attendee_email: Mapped[Optional[str]] = mapped_column(String(255))

    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    team: Mapped[Optional["Team"]] = relationship("Team", back_populates="feedback")  # noqa: F821

    @property
    def ratings(self) -> List[Dict]:
        try:
            return json.loads(self.ratings_json or "[]")
        except (json.JSONDecodeError, TypeError):
            return []
