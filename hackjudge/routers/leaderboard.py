"""Leaderboard router – ranked standings for a selected round."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hackjudge.database import get_db
from hackjudge.models.score import ROUNDS, RoundName
from hackjudge.schemas.leaderboard import Leaderboard
from hackjudge.schemas.team import TeamOut
from hackjudge.services import leaderboard as leaderboard_service, teams as team_service

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.get("", response_model=Leaderboard)
async def read_leaderboard(
    round_name: RoundName = Query(ROUNDS[0], alias="round"),
    db: AsyncSession = Depends(get_db),
):
    """Rank all teams by cumulative score up to and including ``round``."""
    teams = [TeamOut.model_validate(team) for team in await team_service.list_teams(db)]
    return leaderboard_service.build_leaderboard(teams, round_name)
