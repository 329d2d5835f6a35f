from ..extensions import db
from flask_login import UserMixin
from .base import TimestampMixin
from werkzeug.security import generate_password_hash, check_password_hash

ROLES = ("attendee", "speaker", "sponsor", "organizer", "admin", "evaluator")
# roles allowed to manage evaluators and decide on proposals
PRIVILEGED_ROLES = ("organizer", "admin")


class User(db.Model, UserMixin, TimestampMixin):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    name = db.Column(db.String(120), nullable=False, default="")
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), nullable=False, default="attendee")

    def set_password(self, raw):
        self.password_hash = generate_password_hash(raw)

    def check_password(self, raw):
        return check_password_hash(self.password_hash, raw)

    @property
    def is_privileged(self):
        return self.role in PRIVILEGED_ROLES

    def to_dict(self):
        return {"id": self.id, "email": self.email, "name": self.name, "role": self.role}

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role={self.role}>"
