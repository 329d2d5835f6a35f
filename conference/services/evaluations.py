"""Proposal review workflow on top of the database.

Every mutating operation takes the authenticated principal as ``actor``
instead of reading ``current_user``, so the workflow can be driven from
request handlers, scripts and tests alike.
"""
from datetime import datetime

from flask import current_app
from sqlalchemy import case, func
from sqlalchemy.exc import IntegrityError

from ..extensions import db, rq
from ..models.user import User
from ..models.proposal import Proposal, FINAL_STATUSES, STATUS_SUBMITTED
from ..models.evaluator import Evaluator, STATUS_ACTIVE, STATUS_INACTIVE
from ..models.evaluation import (
    Evaluation,
    RECOMMENDATIONS,
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
)
from ..models.conference_session import ConferenceSession
from .scoring import CRITERIA, MAX_SCORE, MIN_SCORE, aggregate, can_decide, compute_overall_score

MIN_COMMENT_LENGTH = 10


class EvaluationError(Exception):
    status_code = 400

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}

    def to_dict(self):
        out = {"error": self.message}
        if self.errors:
            out["errors"] = self.errors
        return out


class NotFound(EvaluationError):
    status_code = 404


class PermissionDenied(EvaluationError):
    status_code = 403


class ValidationFailed(EvaluationError):
    status_code = 400


class Conflict(EvaluationError):
    status_code = 409


def _commit():
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def _require_privileged(actor):
    if actor is None or not getattr(actor, "is_privileged", False):
        raise PermissionDenied("Organizer or admin access required")


def _get_or_404(model, obj_id, label):
    obj = db.session.get(model, obj_id)
    if obj is None:
        raise NotFound(f"{label} not found")
    return obj


# proposals

def create_proposal(actor, data):
    p = Proposal(
        user_id=actor.id,
        title=data["title"],
        description=data["description"],
        track=data["track"],
        session_type=data["session_type"],
        duration=data["duration"],
        status=STATUS_SUBMITTED,
    )
    db.session.add(p)
    _commit()
    current_app.logger.info("Proposal %s submitted by user %s", p.id, actor.id)
    return p


def get_proposal(proposal_id):
    return _get_or_404(Proposal, proposal_id, "Proposal")


def list_proposals(status=None):
    query = Proposal.query
    if status:
        query = query.filter(Proposal.status == status)
    return query.order_by(Proposal.submitted_at.desc(), Proposal.id.desc()).all()


def list_user_proposals(user_id):
    return Proposal.query.filter_by(user_id=user_id).order_by(Proposal.id.desc()).all()


# evaluators

def create_evaluator(actor, user_id, expertise=None):
    _require_privileged(actor)
    user = _get_or_404(User, user_id, "User")
    if Evaluator.query.filter_by(user_id=user.id).first():
        raise Conflict("User is already an evaluator")
    ev = Evaluator(user_id=user.id, expertise=expertise or None, status=STATUS_ACTIVE)
    if not user.is_privileged:
        user.role = "evaluator"
    db.session.add(ev)
    _commit()
    current_app.logger.info("User %s registered as evaluator %s by %s", user.id, ev.id, actor.id)
    return ev


def set_evaluator_status(actor, evaluator_id, status):
    _require_privileged(actor)
    if status not in (STATUS_ACTIVE, STATUS_INACTIVE):
        raise ValidationFailed("Invalid evaluator status", {"status": [f"Must be one of: {STATUS_ACTIVE}, {STATUS_INACTIVE}"]})
    ev = _get_or_404(Evaluator, evaluator_id, "Evaluator")
    ev.status = status
    _commit()
    return ev


def get_evaluator_for_user(user):
    if user is None:
        return None
    return Evaluator.query.filter_by(user_id=user.id).first()


def evaluator_workload():
    """assigned/completed counts per evaluator id."""
    rows = (
        db.session.query(
            Evaluation.evaluator_id,
            func.count(Evaluation.id),
            func.sum(case((Evaluation.status == STATUS_COMPLETED, 1), else_=0)),
        )
        .group_by(Evaluation.evaluator_id)
        .all()
    )
    return {r[0]: {"assigned_count": int(r[1]), "completed_count": int(r[2] or 0)} for r in rows}


def list_evaluators():
    workload = evaluator_workload()
    out = []
    for ev in Evaluator.query.order_by(Evaluator.id.asc()).all():
        row = ev.to_dict()
        row.update(workload.get(ev.id, {"assigned_count": 0, "completed_count": 0}))
        out.append(row)
    return out


# evaluations

def list_proposal_evaluations(proposal_id):
    return (
        Evaluation.query.filter_by(proposal_id=proposal_id)
        .order_by(Evaluation.assigned_at.asc(), Evaluation.id.asc())
        .all()
    )


def list_evaluator_evaluations(evaluator_id):
    return (
        Evaluation.query.filter_by(evaluator_id=evaluator_id)
        .order_by(Evaluation.assigned_at.asc(), Evaluation.id.asc())
        .all()
    )


def _find_assignment(proposal_id, evaluator_id):
    return Evaluation.query.filter_by(proposal_id=proposal_id, evaluator_id=evaluator_id).first()


def assign_evaluator(actor, proposal_id, evaluator_id):
    _require_privileged(actor)
    proposal = _get_or_404(Proposal, proposal_id, "Proposal")
    evaluator = _get_or_404(Evaluator, evaluator_id, "Evaluator")
    if proposal.is_final:
        raise Conflict(f"Proposal is already {proposal.status}")
    if not evaluator.is_active:
        raise Conflict("Evaluator is inactive")
    if _find_assignment(proposal.id, evaluator.id) is not None:
        raise Conflict("Evaluator is already assigned to this proposal")

    ev = Evaluation(proposal_id=proposal.id, evaluator_id=evaluator.id, status=STATUS_PENDING)
    db.session.add(ev)
    try:
        db.session.commit()
    except IntegrityError:
        # concurrent assignment of the same pair
        db.session.rollback()
        raise Conflict("Evaluator is already assigned to this proposal")
    current_app.logger.info("Evaluator %s assigned to proposal %s (evaluation %s)", evaluator.id, proposal.id, ev.id)
    return ev


def _get_own_evaluation(actor, evaluation_id):
    ev = _get_or_404(Evaluation, evaluation_id, "Evaluation")
    evaluator = db.session.get(Evaluator, ev.evaluator_id)
    if actor is None or evaluator is None or evaluator.user_id != actor.id:
        raise PermissionDenied("Evaluation is assigned to another evaluator")
    return ev


def start_evaluation(actor, evaluation_id):
    """Mark an assigned evaluation as opened; only moves pending forward."""
    ev = _get_own_evaluation(actor, evaluation_id)
    if ev.status == STATUS_PENDING:
        ev.status = STATUS_IN_PROGRESS
        _commit()
    return ev


def _clean_submission(payload):
    errors = {}
    cleaned = {}
    for criterion in CRITERIA:
        key = f"{criterion}_score"
        value = payload.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or not MIN_SCORE <= value <= MAX_SCORE:
            errors[key] = [f"Must be a whole number between {MIN_SCORE} and {MAX_SCORE}."]
        else:
            cleaned[criterion] = value

    comments = (payload.get("comments") or "").strip()
    if len(comments) < MIN_COMMENT_LENGTH:
        errors["comments"] = [f"Comments must be at least {MIN_COMMENT_LENGTH} characters"]

    recommendation = payload.get("recommendation")
    if recommendation not in RECOMMENDATIONS:
        errors["recommendation"] = [f"Must be one of: {', '.join(RECOMMENDATIONS)}"]

    if errors:
        raise ValidationFailed("Invalid evaluation", errors)
    return cleaned, comments, recommendation


def submit_evaluation(actor, evaluation_id, payload):
    """Complete an evaluation with all five scores, comments and a recommendation.

    Nothing is written when validation fails. A completed evaluation may be
    submitted again and is overwritten, unless its proposal is decided.
    """
    ev = _get_own_evaluation(actor, evaluation_id)
    proposal = db.session.get(Proposal, ev.proposal_id)
    if proposal is not None and proposal.is_final:
        raise Conflict(f"Proposal is already {proposal.status}")

    scores, comments, recommendation = _clean_submission(payload)
    resubmission = ev.status == STATUS_COMPLETED
    for criterion, value in scores.items():
        setattr(ev, f"{criterion}_score", value)
    ev.overall_score = compute_overall_score(scores)
    ev.comments = comments
    ev.recommendation = recommendation
    ev.status = STATUS_COMPLETED
    ev.completed_at = datetime.utcnow()
    _commit()
    current_app.logger.info(
        "Evaluation %s %s (proposal %s, overall %s, %s)",
        ev.id, "resubmitted" if resubmission else "completed", ev.proposal_id, ev.overall_score, recommendation,
    )
    return ev


def proposal_summary(proposal, evaluations=None):
    if evaluations is None:
        evaluations = list_proposal_evaluations(proposal.id)
    summary = aggregate(evaluations)
    summary["can_decide"] = can_decide(proposal.status, summary)
    return summary


def proposal_summaries(proposals):
    """Summaries keyed by proposal id, loading the evaluations in one query."""
    grouped = {p.id: [] for p in proposals}
    if grouped:
        rows = (
            Evaluation.query.filter(Evaluation.proposal_id.in_(list(grouped)))
            .order_by(Evaluation.assigned_at.asc(), Evaluation.id.asc())
            .all()
        )
        for ev in rows:
            grouped[ev.proposal_id].append(ev)
    return {p.id: proposal_summary(p, grouped[p.id]) for p in proposals}



# decisions

def finalize_decision(actor, proposal_id, status, review_notes=None):
    """Accept or reject a proposal once every assigned review is in.

    Accepting also creates the agenda session for the talk. The speaker is
    notified in the background.
    """
    _require_privileged(actor)
    if status not in FINAL_STATUSES:
        raise ValidationFailed("Invalid decision", {"status": [f"Must be one of: {', '.join(FINAL_STATUSES)}"]})
    proposal = _get_or_404(Proposal, proposal_id, "Proposal")
    summary = proposal_summary(proposal)
    if not summary["can_decide"]:
        current_app.logger.warning(
            "Decision %s on proposal %s refused (proposal %s, reviews %s %s/%s)",
            status, proposal.id, proposal.status, summary["status"], summary["completed_count"], summary["total_count"],
        )
        if proposal.is_final:
            raise Conflict(f"Proposal is already {proposal.status}")
        raise Conflict("All assigned evaluations must be completed before deciding")

    proposal.status = status
    proposal.reviewed_at = datetime.utcnow()
    if review_notes:
        proposal.review_notes = review_notes

    session = None
    if status == "accepted" and not ConferenceSession.query.filter_by(proposal_id=proposal.id).first():
        session = ConferenceSession(
            proposal_id=proposal.id,
            speaker_id=proposal.user_id,
            title=proposal.title,
            description=proposal.description,
            track=proposal.track,
            session_type=proposal.session_type,
            duration=proposal.duration,
        )
        db.session.add(session)
    _commit()
    current_app.logger.info(
        "Proposal %s %s by %s (average %s)", proposal.id, status, actor.id, summary["average_score"],
    )

    if current_app.config.get("DECISION_EMAILS_ENABLED"):
        from ..jobs.notify import notify_decision
        rq.enqueue(notify_decision, proposal.id)
    return proposal, session
