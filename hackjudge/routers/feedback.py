"""
Feedback router – attendee feedback for an event or a single team.

Endpoints:
    POST /api/feedback/submit                          → record feedback
    GET  /api/feedback                                 → all feedback for an event
    GET  /api/feedback/summary                         → rating averages + reactions
    GET  /api/feedback/event/{event_id}/team/{team_id} → feedback for one team
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hackjudge.config import settings
from hackjudge.database import get_db
from hackjudge.schemas.feedback import FeedbackCreate, FeedbackOut, FeedbackSummary
from hackjudge.services import teams as team_service
from hackjudge.services.feedback import summarize_feedback

router = APIRouter(prefix="/api/feedback", tags=["feedback"])


@router.post("/submit", response_model=FeedbackOut, status_code=status.HTTP_201_CREATED)
async def submit_feedback(feedback: FeedbackCreate, db: AsyncSession = Depends(get_db)):
    return await team_service.submit_feedback(db, feedback)


@router.get("", response_model=List[FeedbackOut])
async def event_feedback(
    event_id: str = Query(settings.DEFAULT_EVENT_ID),
    db: AsyncSession = Depends(get_db),
):
    return await team_service.list_feedback(db, event_id)


@router.get("/summary", response_model=FeedbackSummary)
async def feedback_summary(
    event_id: str = Query(settings.DEFAULT_EVENT_ID),
    team_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    if team_id is not None:
        await team_service.get_team(db, team_id)
    entries = await team_service.list_feedback(db, event_id, team_id)
    return summarize_feedback(entries, event_id, team_id)


@router.get("/event/{event_id}/team/{team_id}", response_model=List[FeedbackOut])
async def team_feedback(event_id: str, team_id: str, db: AsyncSession = Depends(get_db)):
    await team_service.get_team(db, team_id)
    return await team_service.list_feedback(db, event_id, team_id)
