"""Scoring and review-readiness rules for CFP evaluations.

Everything here is a pure function over already-loaded data: no database
access, no request context. Evaluations may be model rows or plain dicts.
"""
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP

CRITERIA = ("relevance", "quality", "innovation", "impact", "feasibility")
MIN_SCORE = 1
MAX_SCORE = 5

SUMMARY_NOT_ASSIGNED = "not-assigned"
SUMMARY_PENDING = "pending"
SUMMARY_IN_PROGRESS = "in-progress"
SUMMARY_COMPLETED = "completed"

EVALUATION_COMPLETED = "completed"

RECOMMENDATION_TAGS = ("accept", "reject", "needs-revision")
FINALIZED_PROPOSAL_STATUSES = ("accepted", "rejected")


def _round_half_up(value, places=0):
    exp = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(exp, rounding=ROUND_HALF_UP)


def _check_score(key, value):
    # bool is an int subclass; True must not count as a score of 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"score for {key!r} must be an integer, got {value!r}")
    if not MIN_SCORE <= value <= MAX_SCORE:
        raise ValueError(f"score for {key!r} must be between {MIN_SCORE} and {MAX_SCORE}, got {value}")
    return value


def compute_overall_score(scores):
    """Overall score of one evaluation: the criterion mean, rounded half-up.

    ``scores`` is either a mapping of criterion -> score (any set of
    criteria) or a sequence with one score per entry of ``CRITERIA``.
    Invalid input raises ``ValueError``; nothing is clamped.
    """
    if isinstance(scores, Mapping):
        items = list(scores.items())
    else:
        values = list(scores)
        if len(values) != len(CRITERIA):
            raise ValueError(f"expected {len(CRITERIA)} criterion scores, got {len(values)}")
        items = list(zip(CRITERIA, values))
    if not items:
        raise ValueError("at least one criterion score is required")

    total = sum(_check_score(k, v) for k, v in items)
    return int(_round_half_up(Decimal(total) / len(items)))


def _field(evaluation, name):
    if isinstance(evaluation, Mapping):
        return evaluation.get(name)
    return getattr(evaluation, name, None)


def aggregate(evaluations):
    """Readiness summary for all evaluations attached to one proposal.

    Returns a dict with ``status``, ``completed_count``, ``total_count``,
    ``average_score`` (one decimal, None until something is scored) and
    ``recommendations`` (tag counts over completed evaluations, display only).
    Diverging recommendations are reported, never reconciled.
    """
    evaluations = list(evaluations)
    total = len(evaluations)
    completed = [ev for ev in evaluations if _field(ev, "status") == EVALUATION_COMPLETED]

    if total == 0:
        status = SUMMARY_NOT_ASSIGNED
    elif len(completed) == total:
        status = SUMMARY_COMPLETED
    elif not completed:
        status = SUMMARY_PENDING
    else:
        status = SUMMARY_IN_PROGRESS

    scored = [_field(ev, "overall_score") for ev in evaluations]
    scored = [s for s in scored if s is not None]
    average = None
    if scored:
        average = float(_round_half_up(Decimal(sum(scored)) / len(scored), places=1))

    recommendations = {tag: 0 for tag in RECOMMENDATION_TAGS}
    for ev in completed:
        tag = _field(ev, "recommendation")
        if tag in recommendations:
            recommendations[tag] += 1

    return {
        "status": status,
        "completed_count": len(completed),
        "total_count": total,
        "average_score": average,
        "recommendations": recommendations,
    }


def can_decide(proposal_status, summary):
    """Whether accept/reject may be offered for a proposal.

    Open only once every assigned evaluation is completed and the proposal
    has not been accepted or rejected already.
    """
    if proposal_status in FINALIZED_PROPOSAL_STATUSES:
        return False
    return summary.get("status") == SUMMARY_COMPLETED
