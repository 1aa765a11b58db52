"""Judge score model – one judge's evaluation of one team for one round."""

import enum
import json
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hackjudge.database import Base


class RoundName(str, enum.Enum):
    """Judging rounds, declared in the order they happen."""
    ROUND_1 = "Round 1"
    ROUND_2 = "Round 2"
    FINAL = "Final"


class CategoryName(str, enum.Enum):
    FEASIBILITY = "Feasibility"
    ORIGINALITY = "Originality"
    COMPLETENESS = "Completeness"
    FUNCTIONALITY = "Functionality"
    PRESENTATION = "Presentation"


ROUNDS: List[RoundName] = list(RoundName)
CATEGORIES: List[CategoryName] = list(CategoryName)


class Score(Base):
    __tablename__ = "scores"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    team_id: Mapped[str] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True
    )
    round: Mapped[RoundName] = mapped_column(Enum(RoundName), nullable=False)
    judge: Mapped[Optional[str]] = mapped_column(String(200))

    # ── JSON list of {"name", "score"} (stored as Text for SQLite compat) ──
    categories_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    total_score: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    team: Mapped["Team"] = relationship("Team", back_populates="scores")  # noqa: F821

    # ── JSON helpers ──
    @property
    def categories(self) -> List[Dict]:
        try:
            return json.loads(self.categories_json or "[]")
        except (json.JSONDecodeError, TypeError):
            return []
