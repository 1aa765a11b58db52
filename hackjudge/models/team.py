"""Team model – a competing team and its judged history."""

from datetime import datetime
from typing import List

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hackjudge.database import Base


class Team(Base):
    __tablename__ = "teams"

    # ── Identity (assigned by the organizer, e.g. "team-1") ──
    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    project_name: Mapped[str] = mapped_column(String(300), nullable=False, default="")

    # Cache of sum(Score.total_score); rewritten in the same transaction as every append.
    combined_total_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # ── Relationships ──
    scores: Mapped[List["Score"]] = relationship(  # noqa: F821
        "Score",
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="Score.id",
    )
    feedback: Mapped[List["Feedback"]] = relationship(  # noqa: F821
        "Feedback",
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="Feedback.id",
    )
