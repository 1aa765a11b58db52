"""Validation and totals for judge score submissions."""

from typing import Iterable

from hackjudge.errors import CategoryCountError, CategoryRangeError, DuplicateCategoryError
from hackjudge.models.score import CATEGORIES
from hackjudge.schemas.score import NormalizedScore, ScoreCreate

MIN_CATEGORY_SCORE = 0
MAX_CATEGORY_SCORE = 20
CATEGORY_COUNT = len(CATEGORIES)
MAX_ROUND_SCORE = MAX_CATEGORY_SCORE * CATEGORY_COUNT


def validate_score(candidate: ScoreCreate) -> NormalizedScore:
    """
    Check a submitted score and compute its round total.

    Exactly one entry per judging category is required, each scored within
    ``MIN_CATEGORY_SCORE..MAX_CATEGORY_SCORE``. All categories weigh the same,
    so the total is the plain sum.
    """
    categories = list(candidate.categories or [])
    if len(categories) != CATEGORY_COUNT:
        raise CategoryCountError(len(categories), CATEGORY_COUNT)

    seen = set()
    for category in categories:
        name = getattr(category.name, "value", category.name)
        if not MIN_CATEGORY_SCORE <= category.score <= MAX_CATEGORY_SCORE:
            raise CategoryRangeError(name, category.score, MAX_CATEGORY_SCORE)
        if name in seen:
            raise DuplicateCategoryError(name)
        seen.add(name)

    return NormalizedScore(
        round=candidate.round,
        categories=categories,
        total_score=sum(category.score for category in categories),
        judge=candidate.judge,
    )


def combined_total(totals: Iterable[int]) -> int:
    """Full-history rollup: every round, every judge."""
    return sum(totals)
