"""Builders shared by the test modules."""

from hackjudge.models.score import CATEGORIES


def categories(*scores):
    """Category payload in canonical order: Feasibility, Originality, ..."""
    return [{"name": name.value, "score": score} for name, score in zip(CATEGORIES, scores)]


def score_payload(round_name, *scores, judge=None):
    payload = {"round": round_name, "categories": categories(*scores)}
    if judge:
        payload["judge"] = judge
    return payload


def uniform(total):
    """Five category scores adding up to ``total`` (spread as evenly as possible)."""
    base, extra = divmod(total, 5)
    return [base + 1 if i < extra else base for i in range(5)]
