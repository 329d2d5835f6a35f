from ..extensions import db
from ..services.scoring import CRITERIA, RECOMMENDATION_TAGS as RECOMMENDATIONS

STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in-progress"
STATUS_COMPLETED = "completed"


class Evaluation(db.Model):
    __tablename__ = "proposal_evaluations"

    id = db.Column(db.Integer, primary_key=True)
    proposal_id = db.Column(db.Integer, db.ForeignKey("proposals.id"), nullable=False, index=True)
    evaluator_id = db.Column(db.Integer, db.ForeignKey("proposal_evaluators.id"), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)  # pending/in-progress/completed

    # criterion scores (1-5)
    relevance_score = db.Column(db.Integer)
    quality_score = db.Column(db.Integer)
    innovation_score = db.Column(db.Integer)
    impact_score = db.Column(db.Integer)
    feasibility_score = db.Column(db.Integer)
    overall_score = db.Column(db.Integer)

    comments = db.Column(db.Text)
    recommendation = db.Column(db.String(20))  # accept/reject/needs-revision

    assigned_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    completed_at = db.Column(db.DateTime)

    __table_args__ = (
        db.UniqueConstraint('proposal_id', 'evaluator_id', name='uq_evaluations_proposal_evaluator'),
    )

    @property
    def is_completed(self):
        return self.status == STATUS_COMPLETED

    def scores(self):
        """Criterion scores keyed by criterion name (None when not scored yet)."""
        return {c: getattr(self, f"{c}_score") for c in CRITERIA}

    def to_dict(self):
        out = {
            "id": self.id,
            "proposal_id": self.proposal_id,
            "evaluator_id": self.evaluator_id,
            "status": self.status,
            "scores": self.scores(),
            "overall_score": self.overall_score,
            "comments": self.comments,
            "recommendation": self.recommendation,
            "assigned_at": self.assigned_at.isoformat() if self.assigned_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
        return out

    def __repr__(self) -> str:
        return f"<Evaluation id={self.id} proposal_id={self.proposal_id} evaluator_id={self.evaluator_id} status={self.status}>"
