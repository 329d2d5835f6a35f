from flask_wtf import FlaskForm
from wtforms import IntegerField, TextAreaField, SelectField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange

from ...models.evaluation import RECOMMENDATIONS
from ...services.evaluations import MIN_COMMENT_LENGTH
from ...services.scoring import MIN_SCORE, MAX_SCORE
from ...utils.validators import string_value, whole_number


def _score_field(label):
    return IntegerField(label, validators=[InputRequired(), whole_number, NumberRange(min=MIN_SCORE, max=MAX_SCORE)])


class EvaluationForm(FlaskForm):
    relevance_score = _score_field("Relevance")
    quality_score = _score_field("Quality")
    innovation_score = _score_field("Innovation")
    impact_score = _score_field("Impact")
    feasibility_score = _score_field("Feasibility")
    comments = TextAreaField("Comments", validators=[
        string_value,
        DataRequired(),
        Length(min=MIN_COMMENT_LENGTH, message=f"Comments must be at least {MIN_COMMENT_LENGTH} characters"),
    ], render_kw={"rows": 5})
    recommendation = SelectField("Recommendation", choices=[(r, r.replace("-", " ").title()) for r in RECOMMENDATIONS])
    submit = SubmitField("Submit evaluation")
