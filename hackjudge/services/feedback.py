"""Attendee feedback: validation on the way in, summaries on the way out."""

import json
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from hackjudge.config import settings
from hackjudge.errors import DuplicateRatingError, IdentityRequiredError, RatingRangeError
from hackjudge.models.feedback import Feedback, FeedbackCategory, Reaction
from hackjudge.schemas.feedback import FeedbackCreate, FeedbackSummary

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def record_feedback(candidate: FeedbackCreate, team_id: Optional[str] = None) -> Feedback:
    """
    Validate a feedback submission and build the (unsaved) row for it.

    Non-anonymous feedback must carry both a name and an email; anonymous
    feedback never stores either, even when the form sent them.
    """
    if not candidate.is_anonymous and not (candidate.attendee_name and candidate.attendee_email):
        raise IdentityRequiredError()

    ratings = []
    seen = set()
    for rating in candidate.ratings:
        category = rating.category.value
        if not MIN_RATING <= rating.score <= MAX_RATING:
            raise RatingRangeError(category, rating.score, MIN_RATING, MAX_RATING)
        if category in seen:
            raise DuplicateRatingError(category)
        seen.add(category)
        ratings.append({"category": category, "score": rating.score, "max_score": MAX_RATING})

    return Feedback(
        event_id=candidate.event_id or settings.DEFAULT_EVENT_ID,
        team_id=team_id or candidate.team_id,
        ratings_json=json.dumps(ratings),
        reaction=candidate.reaction,
        comment=candidate.comment or "",
        is_anonymous=candidate.is_anonymous,
        attendee_name=None if candidate.is_anonymous else candidate.attendee_name,
        attendee_email=None if candidate.is_anonymous else str(candidate.attendee_email),
        timestamp=datetime.now(timezone.utc),
    )


def summarize_feedback(
    entries: Iterable[Feedback],
    event_id: str,
    team_id: Optional[str] = None,
) -> FeedbackSummary:
    """Response counts, per-category average rating and a reaction histogram."""
    entries = list(entries)

    totals = {category: [] for category in FeedbackCategory}
    reactions = {reaction: 0 for reaction in Reaction}
    for entry in entries:
        reactions[Reaction(entry.reaction)] += 1
        for rating in entry.ratings:
            try:
                category = FeedbackCategory(rating["category"])
            except (KeyError, ValueError):
                logger.warning(f"Skipping malformed rating on feedback {entry.id}: {rating}")
                continue
            totals[category].append(rating["score"])

    return FeedbackSummary(
        event_id=event_id,
        team_id=team_id,
        responses=len(entries),
        anonymous=sum(1 for entry in entries if entry.is_anonymous),
        average_ratings={
            category: round(sum(scores) / len(scores), 2) if scores else None
            for category, scores in totals.items()
        },
        reactions=reactions,
    )
