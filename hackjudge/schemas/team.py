"""Team Pydantic schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field

from hackjudge.schemas.feedback import FeedbackCreate, FeedbackOut
from hackjudge.schemas.score import ScoreCreate, ScoreOut


class TeamCreate(BaseModel):
    id: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1)
    project_name: str = ""


class TeamSeed(TeamCreate):
    """A team record as provided to the bulk seed, history included."""
    scores: List[ScoreCreate] = []
    feedback: Optional[List[FeedbackCreate]] = None


class TeamOut(BaseModel):
    id: str
    name: str
    project_name: str = ""
    combined_total_score: int = 0
    scores: List[ScoreOut] = []
    feedback: List[FeedbackOut] = []

    model_config = {"from_attributes": True}


class SeedResult(BaseModel):
    message: str
    count: int
