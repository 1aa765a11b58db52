"""Leaderboard Pydantic schemas."""

from typing import List, Optional

from pydantic import BaseModel

from hackjudge.models.feedback import FeedbackCategory, Reaction
from hackjudge.models.score import CategoryName, RoundName


class CategoryAverage(BaseModel):
    name: CategoryName
    average: int


class RoundAverage(BaseModel):
    """Judge averages for one team in one round."""
    round: RoundName
    judges: int
    categories: List[CategoryAverage]
    total: int


class LeaderboardRow(BaseModel):
    rank: int
    team_id: str
    name: str
    project_name: str
    categories: Optional[List[CategoryAverage]] = None
    round_score: Optional[int] = None
    cumulative_score: int
    max_possible_score: int
    round_display: str
    total_display: str


class Leaderboard(BaseModel):
    round: RoundName
    rounds: List[RoundName]
    max_possible_score: int
    rows: List[LeaderboardRow]


class DomainConfig(BaseModel):
    """Fixed domain constants clients should read instead of hard-coding."""
    rounds: List[RoundName]
    categories: List[CategoryName]
    category_count: int
    min_category_score: int
    max_category_score: int
    max_round_score: int
    feedback_categories: List[FeedbackCategory]
    min_rating: int
    max_rating: int
    reactions: List[Reaction]
    default_event_id: str
