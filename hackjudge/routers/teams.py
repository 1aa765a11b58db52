"""Teams router – team records, judge scores and per-team feedback."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from hackjudge.database import get_db
from hackjudge.models.score import RoundName
from hackjudge.schemas.feedback import FeedbackCreate
from hackjudge.schemas.leaderboard import RoundAverage
from hackjudge.schemas.score import ScoreCreate
from hackjudge.schemas.team import TeamCreate, TeamOut
from hackjudge.services import leaderboard, teams as team_service

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("", response_model=List[TeamOut])
async def list_teams(db: AsyncSession = Depends(get_db)):
    """Return every team with its score and feedback history."""
    return await team_service.list_teams(db)


@router.get("/{team_id}", response_model=TeamOut)
async def read_team(team_id: str, db: AsyncSession = Depends(get_db)):
    return await team_service.get_team(db, team_id)


@router.post("", response_model=TeamOut, status_code=status.HTTP_201_CREATED)
async def create_team(data: TeamCreate, db: AsyncSession = Depends(get_db)):
    return await team_service.create_team(db, data)


@router.post("/{team_id}/scores", response_model=TeamOut, status_code=status.HTTP_201_CREATED)
async def add_score(team_id: str, score: ScoreCreate, db: AsyncSession = Depends(get_db)):
    """Record one judge's scores for a round; the team's running total is recomputed."""
    return await team_service.append_score(db, team_id, score)


@router.post("/{team_id}/feedback", response_model=TeamOut, status_code=status.HTTP_201_CREATED)
async def add_feedback(team_id: str, feedback: FeedbackCreate, db: AsyncSession = Depends(get_db)):
    return await team_service.append_feedback(db, team_id, feedback)


@router.get("/{team_id}/rounds/{round_name}", response_model=RoundAverage)
async def read_round_average(team_id: str, round_name: RoundName, db: AsyncSession = Depends(get_db)):
    """Judge averages for one round; 404 until at least one judge has scored it."""
    team = TeamOut.model_validate(await team_service.get_team(db, team_id))
    average = leaderboard.round_average(team, round_name)
    if average is None:
        raise HTTPException(status_code=404, detail=f"No scores recorded for {round_name.value}")
    return average
