from datetime import datetime
from flask import current_app, has_app_context
from ..extensions import db
from ..services.mail import send_decision, render_decision
from ..models.notification import Notification
from ..models.proposal import Proposal
from ..models.user import User


def _run_notify_decision(proposal_id: int):
    proposal = db.session.get(Proposal, proposal_id)
    if not proposal or not proposal.is_final:
        return None
    speaker = db.session.get(User, proposal.user_id)
    if not speaker or not speaker.email:
        current_app.logger.warning('No recipient for decision on proposal %s', proposal_id)
        return None

    subject, body_html = render_decision(proposal, speaker.name)
    status, message_id = send_decision(speaker.email, subject, body_html)
    n = Notification(proposal_id=proposal.id,
                     type="sendgrid", sent_to=speaker.email, subject=subject,
                     body=body_html, provider_message_id=message_id,
                     sent_at=datetime.utcnow())
    db.session.add(n); db.session.commit()
    current_app.logger.info('Decision e-mail for proposal %s sent (status %s)', proposal_id, status)
    return n.id


def notify_decision(proposal_id: int):
    """Entrypoint that ensures execution inside a Flask app context for workers."""
    if has_app_context():
        return _run_notify_decision(proposal_id)
    from conference import create_app
    app = create_app()
    with app.app_context():
        return _run_notify_decision(proposal_id)
