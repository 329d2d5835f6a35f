from flask_wtf import FlaskForm
from wtforms import IntegerField, StringField, SelectField, SubmitField
from wtforms.validators import InputRequired, Length, Optional

from ...models.evaluator import STATUS_ACTIVE, STATUS_INACTIVE
from ...utils.validators import string_value


class EvaluatorForm(FlaskForm):
    user_id = IntegerField("User ID", validators=[InputRequired()])
    expertise = StringField("Expertise", validators=[string_value, Optional(), Length(max=120)])
    submit = SubmitField("Add evaluator")


class EvaluatorStatusForm(FlaskForm):
    status = SelectField("Status", choices=[(STATUS_ACTIVE, "Active"), (STATUS_INACTIVE, "Inactive")])


class AssignEvaluatorForm(FlaskForm):
    proposal_id = IntegerField("Proposal ID", validators=[InputRequired()])
    evaluator_id = IntegerField("Evaluator ID", validators=[InputRequired()])
    submit = SubmitField("Assign")
