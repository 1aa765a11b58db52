"""Attendee feedback Pydantic schemas."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr, field_validator

from hackjudge.models.feedback import FeedbackCategory, Reaction


class RatingIn(BaseModel):
    category: FeedbackCategory
    score: int


class RatingOut(BaseModel):
    category: FeedbackCategory
    score: int
    max_score: int

    model_config = {"from_attributes": True}


class FeedbackCreate(BaseModel):
    """Fields submitted on the feedback form."""
    event_id: Optional[str] = None
    team_id: Optional[str] = None
    ratings: List[RatingIn] = []
    reaction: Reaction = Reaction.NEUTRAL
    comment: str = ""
    is_anonymous: bool = False
    attendee_name: Optional[str] = None
    attendee_email: Optional[EmailStr] = None

    @field_validator("attendee_name", "attendee_email", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # Empty form inputs arrive as "" rather than being omitted.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class FeedbackOut(BaseModel):
    id: int
    event_id: str
    team_id: Optional[str] = None
    ratings: List[RatingOut]
    reaction: Reaction
    comment: str
    is_anonymous: bool
    attendee_name: Optional[str] = None
    attendee_email: Optional[str] = None
    timestamp: datetime

    model_config = {"from_attributes": True}


class FeedbackSummary(BaseModel):
    """Aggregated view of the feedback collected for an event (or one team)."""
    event_id: str
    team_id: Optional[str] = None
    responses: int
    anonymous: int
    average_ratings: Dict[FeedbackCategory, Optional[float]]
    reactions: Dict[Reaction, int]
