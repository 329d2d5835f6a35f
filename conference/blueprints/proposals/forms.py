from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, TextAreaField, SelectField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional

from ...models.proposal import TRACKS, SESSION_TYPES, STATUS_ACCEPTED, STATUS_REJECTED
from ...utils.validators import string_value


class ProposalForm(FlaskForm):
    title = StringField("Title", validators=[string_value, DataRequired(), Length(max=255)])
    description = TextAreaField("Description", validators=[string_value, DataRequired()], render_kw={"rows": 6})
    track = SelectField("Track", choices=[(t, t.replace("-", " ").title()) for t in TRACKS])
    session_type = SelectField("Session type", choices=[(s, s.title()) for s in SESSION_TYPES])
    duration = IntegerField("Duration (minutes)", validators=[InputRequired(), NumberRange(min=5, max=480)])
    submit = SubmitField("Submit proposal")


class DecisionForm(FlaskForm):
    status = SelectField("Decision", choices=[(STATUS_ACCEPTED, "Accept"), (STATUS_REJECTED, "Reject")])
    review_notes = TextAreaField("Review notes", validators=[string_value, Optional()], render_kw={"rows": 3})
    submit = SubmitField("Save decision")
