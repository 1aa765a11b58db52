"""Judge score Pydantic schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from hackjudge.models.score import CategoryName, RoundName


class CategoryScore(BaseModel):
    name: CategoryName
    score: int

    model_config = {"from_attributes": True}


class ScoreCreate(BaseModel):
    """Raw scores a judge submits for one team and one round."""
    round: RoundName
    categories: List[CategoryScore] = []
    judge: Optional[str] = None


class NormalizedScore(BaseModel):
    """A score that passed validation, with its total filled in."""
    round: RoundName
    categories: List[CategoryScore]
    total_score: int
    judge: Optional[str] = None


class ScoreOut(BaseModel):
    id: Optional[int] = None
    round: RoundName
    judge: Optional[str] = None
    categories: List[CategoryScore]
    total_score: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
