from ..extensions import db
from .base import TimestampMixin


class ConferenceSession(db.Model, TimestampMixin):
    """Agenda slot created from an accepted proposal."""
    __tablename__ = "sessions"

    id = db.Column(db.Integer, primary_key=True)
    proposal_id = db.Column(db.Integer, db.ForeignKey("proposals.id"), nullable=False, unique=True)
    speaker_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    track = db.Column(db.String(40), nullable=False)
    session_type = db.Column(db.String(20), nullable=False)
    duration = db.Column(db.Integer, nullable=False)

    # filled in by the scheduling team later
    scheduled_date = db.Column(db.Date)
    scheduled_time = db.Column(db.String(20))  # "09:00-10:30"
    room = db.Column(db.String(80))

    def to_dict(self):
        return {
            "id": self.id,
            "proposal_id": self.proposal_id,
            "speaker_id": self.speaker_id,
            "title": self.title,
            "track": self.track,
            "session_type": self.session_type,
            "duration": self.duration,
            "scheduled_date": self.scheduled_date.isoformat() if self.scheduled_date else None,
            "scheduled_time": self.scheduled_time,
            "room": self.room,
        }

    def __repr__(self) -> str:
        return f"<ConferenceSession id={self.id} proposal_id={self.proposal_id}>"
