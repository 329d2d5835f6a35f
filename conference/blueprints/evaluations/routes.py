from flask import jsonify
from flask_login import current_user
from . import bp
from .forms import EvaluationForm
from ...models.evaluation import STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED
from ...models.proposal import Proposal
from ...services import evaluations as svc
from ...utils.decorators import admin_required, evaluator_required


@bp.get("/mine")
@evaluator_required
def my_evaluations():
    evaluator = svc.get_evaluator_for_user(current_user)
    groups = {STATUS_PENDING: [], STATUS_IN_PROGRESS: [], STATUS_COMPLETED: []}
    if evaluator is None:
        return jsonify({"evaluator": None, "evaluations": groups})

    evaluations = svc.list_evaluator_evaluations(evaluator.id)
    prop_ids = list({ev.proposal_id for ev in evaluations})
    prop_map = {p.id: p for p in Proposal.query.filter(Proposal.id.in_(prop_ids)).all()} if prop_ids else {}
    for ev in evaluations:
        row = ev.to_dict()
        p = prop_map.get(ev.proposal_id)
        row["proposal"] = p.to_dict() if p else None
        groups.setdefault(ev.status, []).append(row)
    return jsonify({"evaluator": evaluator.to_dict(), "evaluations": groups})


@bp.get("/evaluator/<int:evaluator_id>")
@admin_required
def evaluator_evaluations(evaluator_id):
    return jsonify([ev.to_dict() for ev in svc.list_evaluator_evaluations(evaluator_id)])


@bp.post("/<int:evaluation_id>/start")
@evaluator_required
def start(evaluation_id):
    ev = svc.start_evaluation(current_user._get_current_object(), evaluation_id)
    return jsonify(ev.to_dict())


@bp.post("/<int:evaluation_id>/submit")
@evaluator_required
def submit(evaluation_id):
    form = EvaluationForm()
    if not form.validate_on_submit():
        return jsonify({"error": "Invalid evaluation", "errors": form.errors}), 400
    payload = {name: form[name].data for name in (
        "relevance_score", "quality_score", "innovation_score", "impact_score", "feasibility_score",
        "comments", "recommendation",
    )}
    ev = svc.submit_evaluation(current_user._get_current_object(), evaluation_id, payload)
    return jsonify(ev.to_dict())
