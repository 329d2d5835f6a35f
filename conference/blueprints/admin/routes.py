from flask import jsonify
from flask_login import current_user
from . import bp
from .forms import EvaluatorForm, EvaluatorStatusForm, AssignEvaluatorForm
from ...services import evaluations as svc
from ...utils.decorators import admin_required


def _invalid(form):
    return jsonify({"error": "Invalid input", "errors": form.errors}), 400


@bp.get("/evaluators")
@admin_required
def evaluators_index():
    return jsonify(svc.list_evaluators())


@bp.post("/evaluators")
@admin_required
def create_evaluator():
    form = EvaluatorForm()
    if not form.validate_on_submit():
        return _invalid(form)
    ev = svc.create_evaluator(current_user._get_current_object(), form.user_id.data, form.expertise.data)
    return jsonify(ev.to_dict()), 201


@bp.post("/evaluators/<int:evaluator_id>/status")
@admin_required
def evaluator_status(evaluator_id):
    form = EvaluatorStatusForm()
    if not form.validate_on_submit():
        return _invalid(form)
    ev = svc.set_evaluator_status(current_user._get_current_object(), evaluator_id, form.status.data)
    return jsonify(ev.to_dict())


@bp.post("/assign-evaluator")
@admin_required
def assign_evaluator():
    form = AssignEvaluatorForm()
    if not form.validate_on_submit():
        return _invalid(form)
    ev = svc.assign_evaluator(current_user._get_current_object(), form.proposal_id.data, form.evaluator_id.data)
    return jsonify(ev.to_dict()), 201
