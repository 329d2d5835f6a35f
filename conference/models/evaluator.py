from ..extensions import db
from .base import TimestampMixin

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"


class Evaluator(db.Model, TimestampMixin):
    __tablename__ = "proposal_evaluators"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, unique=True)
    expertise = db.Column(db.String(120))
    # deactivated instead of deleted
    status = db.Column(db.String(20), nullable=False, default=STATUS_ACTIVE)

    @property
    def is_active(self):
        return self.status == STATUS_ACTIVE

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "expertise": self.expertise,
            "status": self.status,
        }

    def __repr__(self) -> str:
        return f"<Evaluator id={self.id} user_id={self.user_id}>"
