from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import DataRequired, Email, EqualTo, Length

from ...utils.validators import string_value


class SignupForm(FlaskForm):
    name = StringField("Name", validators=[string_value, DataRequired(), Length(max=120)])
    email = StringField("Email", validators=[string_value, DataRequired(), Email()])
    password = PasswordField("Password", validators=[string_value, DataRequired(), Length(min=8)])
    confirm = PasswordField("Confirm password", validators=[string_value, DataRequired(), EqualTo('password')])
    submit = SubmitField("Create account")


class LoginForm(FlaskForm):
    email = StringField("Email", validators=[string_value, DataRequired(), Email()])
    password = PasswordField("Password", validators=[string_value, DataRequired()])
    submit = SubmitField("Login")
