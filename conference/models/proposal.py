from ..extensions import db
from .base import TimestampMixin

TRACKS = ("design-thinking", "innovation", "technology", "culture")
SESSION_TYPES = ("talk", "workshop", "panel")

STATUS_SUBMITTED = "submitted"
STATUS_UNDER_REVIEW = "under-review"
STATUS_ACCEPTED = "accepted"
STATUS_REJECTED = "rejected"
STATUSES = (STATUS_SUBMITTED, STATUS_UNDER_REVIEW, STATUS_ACCEPTED, STATUS_REJECTED)
FINAL_STATUSES = (STATUS_ACCEPTED, STATUS_REJECTED)


class Proposal(db.Model, TimestampMixin):
    __tablename__ = "proposals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    track = db.Column(db.String(40), nullable=False)         # design-thinking/innovation/technology/culture
    session_type = db.Column(db.String(20), nullable=False)  # talk/workshop/panel
    duration = db.Column(db.Integer, nullable=False)         # minutes

    # review
    status = db.Column(db.String(20), nullable=False, default=STATUS_SUBMITTED, index=True)
    submitted_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    reviewed_at = db.Column(db.DateTime)
    review_notes = db.Column(db.Text)

    @property
    def is_final(self):
        return self.status in FINAL_STATUSES

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "track": self.track,
            "session_type": self.session_type,
            "duration": self.duration,
            "status": self.status,
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "review_notes": self.review_notes,
        }

    def __repr__(self) -> str:
        return f"<Proposal id={self.id} status={self.status}>"
