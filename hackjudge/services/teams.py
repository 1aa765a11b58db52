"""
Team persistence – the only module that writes teams, scores and feedback.

Each mutation is one transaction against one team. Appending a score locks
the team row, inserts the score and recomputes ``combined_total_score`` in
SQL from everything stored for that team before committing, so concurrent
judges never overwrite each other's totals.
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hackjudge.errors import DuplicateTeamError, NotFoundError, PersistenceError
from hackjudge.models.feedback import Feedback
from hackjudge.models.score import Score
from hackjudge.models.team import Team
from hackjudge.schemas.feedback import FeedbackCreate
from hackjudge.schemas.score import NormalizedScore, ScoreCreate
from hackjudge.schemas.team import TeamCreate, TeamSeed
from hackjudge.services.feedback import record_feedback
from hackjudge.services.scoring import combined_total, validate_score

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _storage(db: AsyncSession, action: str):
    """Roll back and re-raise storage failures as PersistenceError."""
    try:
        yield
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error(f"Storage failure while {action}: {exc}", exc_info=True)
        raise PersistenceError(f"Storage failure while {action}") from exc


def _team_query():
    return (
        select(Team)
        .options(selectinload(Team.scores), selectinload(Team.feedback))
        .execution_options(populate_existing=True)
    )


def _score_row(score: NormalizedScore) -> Score:
    return Score(
        round=score.round,
        judge=score.judge,
        categories_json=json.dumps(
            [{"name": c.name.value, "score": c.score} for c in score.categories]
        ),
        total_score=score.total_score,
    )


async def _lock_team(db: AsyncSession, team_id: str) -> Team:
    # FOR UPDATE is a no-op on SQLite, where writers are already serialized.
    result = await db.execute(select(Team).where(Team.id == team_id).with_for_update())
    team = result.scalar_one_or_none()
    if not team:
        raise NotFoundError("Team not found")
    return team


# ═══════════════════════════════════════════════════════════════
#  Reads
# ═══════════════════════════════════════════════════════════════

async def list_teams(db: AsyncSession) -> List[Team]:
    async with _storage(db, "listing teams"):
        result = await db.execute(_team_query().order_by(Team.created_at, Team.id))
        return list(result.scalars().all())


async def get_team(db: AsyncSession, team_id: str) -> Team:
    async with _storage(db, "loading a team"):
        result = await db.execute(_team_query().where(Team.id == team_id))
        team = result.scalar_one_or_none()
    if not team:
        raise NotFoundError("Team not found")
    return team


async def list_feedback(
    db: AsyncSession, event_id: str, team_id: Optional[str] = None
) -> List[Feedback]:
    query = select(Feedback).where(Feedback.event_id == event_id)
    if team_id is not None:
        query = query.where(Feedback.team_id == team_id)
    async with _storage(db, "listing feedback"):
        result = await db.execute(query.order_by(Feedback.timestamp, Feedback.id))
        return list(result.scalars().all())


# ═══════════════════════════════════════════════════════════════
#  Writes
# ═══════════════════════════════════════════════════════════════

async def create_team(db: AsyncSession, data: TeamCreate) -> Team:
    async with _storage(db, "creating a team"):
        if await db.get(Team, data.id) is not None:
            raise DuplicateTeamError(f"Team {data.id} already exists")
        db.add(Team(id=data.id, name=data.name, project_name=data.project_name))
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise DuplicateTeamError(f"Team {data.id} already exists") from exc

    logger.info(f"Created team {data.id} ({data.name})")
    return await get_team(db, data.id)


async def append_score(db: AsyncSession, team_id: str, candidate: ScoreCreate) -> Team:
    """Append one judge's score and recompute the team's combined total atomically."""
    async with _storage(db, "appending a score"):
        team = await _lock_team(db, team_id)
        normalized = validate_score(candidate)

        row = _score_row(normalized)
        row.team_id = team.id
        db.add(row)
        await db.flush()

        combined = await db.scalar(
            select(func.coalesce(func.sum(Score.total_score), 0)).where(Score.team_id == team.id)
        )
        team.combined_total_score = combined
        await db.commit()

    logger.info(
        f"Team {team_id}: {normalized.round.value} score {normalized.total_score} recorded, "
        f"combined total now {combined}"
    )
    return await get_team(db, team_id)


async def append_feedback(db: AsyncSession, team_id: str, candidate: FeedbackCreate) -> Team:
    async with _storage(db, "appending feedback"):
        team = await _lock_team(db, team_id)
        entry = record_feedback(candidate, team_id=team.id)
        db.add(entry)
        await db.commit()

    logger.info(f"Feedback recorded for team {team_id} (event {entry.event_id})")
    return await get_team(db, team_id)


async def submit_feedback(db: AsyncSession, candidate: FeedbackCreate) -> Feedback:
    """Record event-level feedback, or team feedback when ``team_id`` is set."""
    async with _storage(db, "submitting feedback"):
        if candidate.team_id is not None and await db.get(Team, candidate.team_id) is None:
            raise NotFoundError("Team not found")
        entry = record_feedback(candidate)
        db.add(entry)
        await db.commit()

    logger.info(f"Feedback {entry.id} recorded for event {entry.event_id}")
    return entry


async def seed_teams(db: AsyncSession, teams: Iterable[TeamSeed]) -> int:
    """
    Upsert teams by id, replacing their stored score history.

    Feedback is replaced only when the seed record lists it. Running the same
    seed twice leaves the same rows behind.
    """
    # Later records win when the payload repeats an id.
    unique = {seed.id: seed for seed in teams}

    # Validate everything before the first write.
    prepared = []
    for seed in unique.values():
        scores = [validate_score(score) for score in seed.scores]
        feedback = None
        if seed.feedback is not None:
            feedback = [record_feedback(entry, team_id=seed.id) for entry in seed.feedback]
        prepared.append((seed, scores, feedback))

    async with _storage(db, "seeding teams"):
        for seed, scores, feedback in prepared:
            team = await db.get(
                Team,
                seed.id,
                options=[selectinload(Team.scores), selectinload(Team.feedback)],
                populate_existing=True,
            )
            if team is None:
                team = Team(id=seed.id, feedback=[])
                db.add(team)

            team.name = seed.name
            team.project_name = seed.project_name
            team.scores = [_score_row(score) for score in scores]
            team.combined_total_score = combined_total(score.total_score for score in scores)
            if feedback is not None:
                team.feedback = feedback

            await db.flush()
        await db.commit()

    logger.info(f"Seeded {len(prepared)} teams")
    return len(prepared)
