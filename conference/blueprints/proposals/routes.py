from flask import abort, jsonify, request
from flask_login import login_required, current_user
from . import bp
from .forms import ProposalForm, DecisionForm
from ...services import evaluations as svc
from ...utils.decorators import admin_required


@bp.post("")
@login_required
def create_proposal():
    form = ProposalForm()
    if not form.validate_on_submit():
        return jsonify({"error": "Invalid input", "errors": form.errors}), 400
    p = svc.create_proposal(current_user._get_current_object(), {
        "title": form.title.data.strip(),
        "description": form.description.data.strip(),
        "track": form.track.data,
        "session_type": form.session_type.data,
        "duration": form.duration.data,
    })
    return jsonify(p.to_dict()), 201


@bp.get("")
@admin_required
def list_proposals():
    # review dashboard: every proposal with its readiness summary
    proposals = svc.list_proposals(status=request.args.get("status") or None)
    summaries = svc.proposal_summaries(proposals)
    items = []
    for p in proposals:
        row = p.to_dict()
        row["review"] = summaries[p.id]
        items.append(row)
    return jsonify(items)


@bp.get("/mine")
@login_required
def my_proposals():
    return jsonify([p.to_dict() for p in svc.list_user_proposals(current_user.id)])


@bp.get("/<int:proposal_id>")
@login_required
def detail(proposal_id):
    p = svc.get_proposal(proposal_id)
    if p.user_id != current_user.id and not current_user.is_privileged:
        abort(403)
    out = p.to_dict()
    if current_user.is_privileged:
        out["review"] = svc.proposal_summary(p)
    return jsonify(out)


@bp.get("/<int:proposal_id>/evaluations")
@admin_required
def proposal_evaluations(proposal_id):
    p = svc.get_proposal(proposal_id)
    evaluations = svc.list_proposal_evaluations(p.id)
    return jsonify({
        "proposal": p.to_dict(),
        "evaluations": [ev.to_dict() for ev in evaluations],
        "review": svc.proposal_summary(p, evaluations),
    })


@bp.post("/<int:proposal_id>/decision")
@admin_required
def decide(proposal_id):
    form = DecisionForm()
    if not form.validate_on_submit():
        return jsonify({"error": "Invalid input", "errors": form.errors}), 400
    proposal, session = svc.finalize_decision(
        current_user._get_current_object(), proposal_id, form.status.data, form.review_notes.data or None,
    )
    out = proposal.to_dict()
    out["session"] = session.to_dict() if session else None
    return jsonify(out)
