from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail
from flask import current_app
from markupsafe import escape


def send_decision(to_email, subject, html):
    """Send one decision e-mail; returns (HTTP status, SendGrid message id)."""
    api_key = current_app.config.get('SENDGRID_API_KEY')
    if not api_key:
        raise RuntimeError("SENDGRID_API_KEY is not configured")
    message = Mail(from_email=(current_app.config['MAIL_FROM'], current_app.config['MAIL_FROM_NAME']),
                   to_emails=to_email,
                   subject=subject,
                   html_content=html)
    resp = SendGridAPIClient(api_key=api_key).send(message)
    headers = getattr(resp, 'headers', None) or {}
    return resp.status_code, headers.get('X-Message-Id')


def render_decision(proposal, speaker_name=None):
    """Subject and HTML body of the decision e-mail for a proposal."""
    greeting = f"Dear {escape(speaker_name)}," if speaker_name else "Hello,"
    if proposal.status == "accepted":
        subject = f"Your proposal \"{proposal.title}\" has been accepted"
        outcome = "We are happy to let you know that your proposal has been accepted. Scheduling details will follow."
    else:
        subject = f"Your proposal \"{proposal.title}\""
        outcome = "Thank you for your submission. Unfortunately we are unable to include your proposal in this year's program."
    body = f"<p>{greeting}</p><p>{outcome}</p>"
    if proposal.review_notes:
        body += f"<p>Notes from the committee:</p><p>{escape(proposal.review_notes)}</p>"
    return subject, body
