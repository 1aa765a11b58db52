import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from hackjudge.errors import (
    CategoryCountError,
    CategoryRangeError,
    DuplicateTeamError,
    NotFoundError,
    PersistenceError,
)
from hackjudge.models.score import Score
from hackjudge.models.team import Team
from hackjudge.schemas.feedback import FeedbackCreate
from hackjudge.schemas.score import ScoreCreate
from hackjudge.schemas.team import TeamCreate, TeamSeed
from hackjudge.seed_data import default_seed
from hackjudge.services import teams as team_service

from tests.helpers import score_payload, uniform


def score(round_name, total):
    return ScoreCreate.model_validate(score_payload(round_name, *uniform(total)))


async def test_create_and_get(db):
    await team_service.create_team(db, TeamCreate(id="t1", name="Alpha", project_name="Rover"))
    team = await team_service.get_team(db, "t1")
    assert team.name == "Alpha"
    assert team.project_name == "Rover"
    assert team.scores == []
    assert team.combined_total_score == 0


async def test_duplicate_team_rejected(db):
    await team_service.create_team(db, TeamCreate(id="t1", name="Alpha"))
    with pytest.raises(DuplicateTeamError):
        await team_service.create_team(db, TeamCreate(id="t1", name="Again"))


async def test_unknown_team(db):
    with pytest.raises(NotFoundError):
        await team_service.get_team(db, "nope")
    with pytest.raises(NotFoundError):
        await team_service.append_score(db, "nope", score("Round 1", 50))


async def test_unknown_team_reported_before_invalid_score(db):
    bad = ScoreCreate.model_validate(score_payload("Round 1", 10, 10, 25, 10, 10))
    with pytest.raises(NotFoundError):
        await team_service.append_score(db, "nope", bad)
    await db.rollback()

    stored = await db.scalar(select(func.count()).select_from(Score))
    assert stored == 0


async def test_combined_total_after_three_scores(db):
    await team_service.create_team(db, TeamCreate(id="t1", name="Alpha"))
    for round_name, total in [("Round 1", 80), ("Round 1", 90), ("Round 2", 70)]:
        team = await team_service.append_score(db, "t1", score(round_name, total))

    assert team.combined_total_score == 240
    assert [s.total_score for s in team.scores] == [80, 90, 70]
    assert [s.round.value for s in team.scores] == ["Round 1", "Round 1", "Round 2"]


async def test_combined_total_is_recomputed_from_storage(session_factory):
    async with session_factory() as setup:
        await team_service.create_team(setup, TeamCreate(id="t1", name="Alpha"))

    async with session_factory() as first, session_factory() as second:
        stale = await team_service.get_team(first, "t1")
        assert stale.combined_total_score == 0

        await team_service.append_score(second, "t1", score("Round 1", 80))
        team = await team_service.append_score(first, "t1", score("Round 1", 60))

    assert team.combined_total_score == 140
    assert len(team.scores) == 2


async def test_invalid_score_leaves_team_untouched(db):
    await team_service.create_team(db, TeamCreate(id="t1", name="Alpha"))
    await team_service.append_score(db, "t1", score("Round 1", 80))

    bad = ScoreCreate.model_validate(score_payload("Round 1", 10, 10, 25, 10, 10))
    with pytest.raises(CategoryRangeError):
        await team_service.append_score(db, "t1", bad)
    await db.rollback()

    team = await team_service.get_team(db, "t1")
    assert len(team.scores) == 1
    assert team.combined_total_score == 80


async def test_seed_is_idempotent(db):
    first = await team_service.seed_teams(db, default_seed())
    second = await team_service.seed_teams(db, default_seed())
    assert first == second == 5

    team_count = await db.scalar(select(func.count(Team.id)))
    score_count = await db.scalar(select(func.count(Score.id)))
    assert team_count == 5
    assert score_count == 11

    team = await team_service.get_team(db, "team-1")
    assert team.combined_total_score == 251


async def test_seed_updates_existing_team(db):
    await team_service.create_team(db, TeamCreate(id="t1", name="Old name"))
    await team_service.append_score(db, "t1", score("Round 1", 40))

    seeds = [
        TeamSeed(id="t1", name="New name", project_name="Lander", scores=[score("Round 1", 90)]),
        TeamSeed(id="t2", name="Fresh", feedback=[FeedbackCreate(is_anonymous=True)]),
    ]
    assert await team_service.seed_teams(db, seeds) == 2

    t1 = await team_service.get_team(db, "t1")
    assert t1.name == "New name"
    assert [s.total_score for s in t1.scores] == [90]
    assert t1.combined_total_score == 90

    t2 = await team_service.get_team(db, "t2")
    assert len(t2.feedback) == 1
    assert t2.feedback[0].team_id == "t2"


async def test_seed_rejects_invalid_scores_before_writing(db):
    bad = ScoreCreate.model_validate(score_payload("Round 1", 10, 10, 10, 10))
    with pytest.raises(CategoryCountError):
        await team_service.seed_teams(db, [TeamSeed(id="t1", name="Alpha", scores=[bad])])
    assert await db.scalar(select(func.count(Team.id))) == 0


async def test_feedback_for_event_and_team(db):
    await team_service.create_team(db, TeamCreate(id="t1", name="Alpha"))

    team = await team_service.append_feedback(
        db, "t1", FeedbackCreate(is_anonymous=True, event_id="hack-1", comment="Nice demo")
    )
    assert [f.comment for f in team.feedback] == ["Nice demo"]

    await team_service.submit_feedback(db, FeedbackCreate(is_anonymous=True, event_id="hack-1"))
    await team_service.submit_feedback(db, FeedbackCreate(is_anonymous=True, event_id="other"))

    assert len(await team_service.list_feedback(db, "hack-1")) == 2
    assert len(await team_service.list_feedback(db, "hack-1", "t1")) == 1

    with pytest.raises(NotFoundError):
        await team_service.submit_feedback(
            db, FeedbackCreate(is_anonymous=True, team_id="missing")
        )


async def test_storage_failures_become_persistence_errors(db, monkeypatch):
    async def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "execute", broken)
    with pytest.raises(PersistenceError) as excinfo:
        await team_service.list_teams(db)
    assert isinstance(excinfo.value.__cause__, OperationalError)
