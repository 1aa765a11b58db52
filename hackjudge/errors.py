"""Domain exceptions raised by the HackJudge services.

Routers never catch these; ``hackjudge.main`` maps each family onto an HTTP
status (404 / 400 / 409 / 500).
"""


class HackJudgeError(Exception):
    """Base class for every error the services raise on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(HackJudgeError):
    """Unknown team id."""


class DuplicateTeamError(HackJudgeError):
    """A team with the same id already exists."""


class PersistenceError(HackJudgeError):
    """Opaque failure from the storage layer."""


# ── Validation ──

class ValidationError(HackJudgeError):
    """A candidate score or feedback entry was rejected before any write."""


class CategoryCountError(ValidationError):
    def __init__(self, count: int, expected: int):
        super().__init__(f"Scores must include exactly {expected} categories (got {count})")
        self.count = count


class CategoryRangeError(ValidationError):
    def __init__(self, category: str, score: int, max_score: int):
        if score < 0:
            message = f"Category {category} cannot have a negative score"
        else:
            message = f"Category {category} exceeds max score of {max_score}"
        super().__init__(message)
        self.category = category
        self.score = score


class DuplicateCategoryError(ValidationError):
    def __init__(self, category: str):
        super().__init__(f"Category {category} was scored more than once")
        self.category = category


class IdentityRequiredError(ValidationError):
    def __init__(self):
        super().__init__("Please provide your name and email, or submit anonymously")


class RatingRangeError(ValidationError):
    def __init__(self, category: str, score: int, min_score: int, max_score: int):
        super().__init__(
            f"Rating for {category} must be between {min_score} and {max_score} (got {score})"
        )
        self.category = category
        self.score = score


class DuplicateRatingError(ValidationError):
    def __init__(self, category: str):
        super().__init__(f"Feedback category {category} was rated more than once")
        self.category = category
