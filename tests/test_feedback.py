import pytest

from hackjudge.config import settings
from hackjudge.errors import DuplicateRatingError, IdentityRequiredError, RatingRangeError
from hackjudge.models.feedback import FeedbackCategory, Reaction
from hackjudge.schemas.feedback import FeedbackCreate
from hackjudge.services.feedback import record_feedback, summarize_feedback


def make(**fields):
    return FeedbackCreate.model_validate(fields)


def test_named_feedback_requires_email():
    with pytest.raises(IdentityRequiredError):
        record_feedback(make(attendee_name="Ada Lovelace"))


def test_named_feedback_requires_name():
    with pytest.raises(IdentityRequiredError):
        record_feedback(make(attendee_email="ada@example.com"))


def test_blank_identity_counts_as_missing():
    with pytest.raises(IdentityRequiredError):
        record_feedback(make(attendee_name="Ada", attendee_email="  "))


def test_anonymous_feedback_needs_no_identity():
    entry = record_feedback(make(is_anonymous=True, comment="Great mentors"))
    assert entry.is_anonymous is True
    assert entry.attendee_name is None
    assert entry.attendee_email is None
    assert entry.comment == "Great mentors"
    assert entry.timestamp is not None


def test_anonymous_feedback_drops_identity():
    entry = record_feedback(
        make(is_anonymous=True, attendee_name="Ada", attendee_email="ada@example.com")
    )
    assert entry.attendee_name is None
    assert entry.attendee_email is None


def test_named_feedback_is_kept():
    entry = record_feedback(
        make(
            event_id="hack-1",
            attendee_name="Ada",
            attendee_email="ada@example.com",
            reaction="excited",
            ratings=[{"category": "venue", "score": 4}],
        ),
        team_id="team-1",
    )
    assert entry.event_id == "hack-1"
    assert entry.team_id == "team-1"
    assert entry.attendee_email == "ada@example.com"
    assert entry.reaction == Reaction.EXCITED
    assert entry.ratings == [{"category": "venue", "score": 4, "max_score": 5}]


def test_event_defaults_from_settings():
    entry = record_feedback(make(is_anonymous=True))
    assert entry.event_id == settings.DEFAULT_EVENT_ID
    assert entry.team_id is None


@pytest.mark.parametrize("score", [0, 6])
def test_rating_out_of_range_rejected(score):
    with pytest.raises(RatingRangeError) as excinfo:
        record_feedback(make(is_anonymous=True, ratings=[{"category": "content", "score": score}]))
    assert excinfo.value.category == "content"


def test_rating_category_once():
    ratings = [{"category": "venue", "score": 3}, {"category": "venue", "score": 5}]
    with pytest.raises(DuplicateRatingError):
        record_feedback(make(is_anonymous=True, ratings=ratings))


def test_summary():
    entries = [
        record_feedback(make(
            is_anonymous=True,
            reaction="happy",
            ratings=[{"category": "organization", "score": 4}, {"category": "venue", "score": 3}],
        )),
        record_feedback(make(
            attendee_name="Ada",
            attendee_email="ada@example.com",
            reaction="happy",
            ratings=[{"category": "organization", "score": 5}],
        )),
        record_feedback(make(is_anonymous=True, reaction="frustrated")),
    ]

    summary = summarize_feedback(entries, "hackathon-2023")

    assert summary.responses == 3
    assert summary.anonymous == 2
    assert summary.average_ratings[FeedbackCategory.ORGANIZATION] == 4.5
    assert summary.average_ratings[FeedbackCategory.VENUE] == 3.0
    assert summary.average_ratings[FeedbackCategory.MENTORSHIP] is None
    assert summary.reactions[Reaction.HAPPY] == 2
    assert summary.reactions[Reaction.FRUSTRATED] == 1
    assert summary.reactions[Reaction.EXCITED] == 0
    assert set(summary.reactions) == set(Reaction)


def test_summary_of_nothing():
    summary = summarize_feedback([], "hackathon-2023", team_id="team-9")
    assert summary.responses == 0
    assert summary.team_id == "team-9"
    assert all(value is None for value in summary.average_ratings.values())
