"""
Leaderboard aggregation.

Every figure is recomputed from the raw score history on each call:

* a round's average is the mean over the judges who scored that round,
  rounded half-up (so 80.5 shows as 81);
* a team's cumulative score sums those round averages from the first round
  up to the selected one, a round nobody has scored yet counting as 0;
* teams rank by cumulative score, highest first, then by name and id.
"""

from typing import List, Optional, Sequence, Union

from hackjudge.models.score import CATEGORIES, ROUNDS, RoundName
from hackjudge.schemas.leaderboard import (
    CategoryAverage,
    Leaderboard,
    LeaderboardRow,
    RoundAverage,
)
from hackjudge.schemas.team import TeamOut
from hackjudge.services.scoring import MAX_ROUND_SCORE

PLACEHOLDER = "-"

RoundLike = Union[RoundName, str]


def round_half_up(total: int, count: int) -> int:
    """Mean of ``count`` non-negative integers summing to ``total``, rounded half-up."""
    return (2 * total + count) // (2 * count)


def _round_index(round_name: RoundLike) -> int:
    return ROUNDS.index(RoundName(round_name))


def _category_score(score, name) -> int:
    for category in score.categories:
        if category.name == name:
            return category.score
    return 0


def round_average(team: TeamOut, round_name: RoundLike) -> Optional[RoundAverage]:
    """Average the judges' scores for one round, or None when nobody scored it."""
    round_name = RoundName(round_name)
    entries = [score for score in team.scores if score.round == round_name]
    if not entries:
        return None

    judges = len(entries)
    categories = [
        CategoryAverage(
            name=name,
            average=round_half_up(sum(_category_score(s, name) for s in entries), judges),
        )
        for name in CATEGORIES
    ]
    return RoundAverage(
        round=round_name,
        judges=judges,
        categories=categories,
        total=round_half_up(sum(s.total_score for s in entries), judges),
    )


def cumulative_score(team: TeamOut, upto_round: RoundLike) -> int:
    total = 0
    for round_name in ROUNDS[: _round_index(upto_round) + 1]:
        average = round_average(team, round_name)
        if average is not None:
            total += average.total
    return total


def max_possible_score(upto_round: RoundLike) -> int:
    return MAX_ROUND_SCORE * (_round_index(upto_round) + 1)


def rank(teams: Sequence[TeamOut], upto_round: RoundLike) -> List[TeamOut]:
    # Ties fall back to name (case-insensitive) and then id, never to input order.
    return sorted(
        teams,
        key=lambda team: (-cumulative_score(team, upto_round), team.name.casefold(), team.id),
    )


def format_fraction(value: Optional[int], maximum: int) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value}/{maximum}"


def build_leaderboard(teams: Sequence[TeamOut], round_name: RoundLike) -> Leaderboard:
    """Ranked rows for the selected round, with display strings filled in."""
    round_name = RoundName(round_name)
    max_possible = max_possible_score(round_name)
    prefix = ROUNDS[: _round_index(round_name) + 1]

    rows = []
    for position, team in enumerate(rank(teams, round_name), start=1):
        current = round_average(team, round_name)
        scored_any = any(round_average(team, r) is not None for r in prefix)
        cumulative = cumulative_score(team, round_name)

        rows.append(
            LeaderboardRow(
                rank=position,
                team_id=team.id,
                name=team.name,
                project_name=team.project_name,
                categories=current.categories if current else None,
                round_score=current.total if current else None,
                cumulative_score=cumulative,
                max_possible_score=max_possible,
                round_display=format_fraction(current.total if current else None, MAX_ROUND_SCORE),
                total_display=format_fraction(cumulative if scored_any else None, max_possible),
            )
        )

    return Leaderboard(
        round=round_name,
        rounds=ROUNDS,
        max_possible_score=max_possible,
        rows=rows,
    )
