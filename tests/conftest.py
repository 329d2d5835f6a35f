import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from conference import create_app
from conference.extensions import db
from conference.models.user import User
from conference.services import evaluations as svc


@pytest.fixture
def app():
    app = create_app('config.TestConfig')
    with app.app_context():
        import conference.models  # noqa: F401
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make(email, role="attendee", password="password123", name=None):
        u = User(email=email, name=name or email.split("@")[0], role=role)
        u.set_password(password)
        db.session.add(u)
        db.session.commit()
        return u
    return _make


@pytest.fixture
def admin(make_user):
    return make_user("admin@example.com", role="admin")


@pytest.fixture
def speaker(make_user):
    return make_user("speaker@example.com", role="speaker")


@pytest.fixture
def proposal(speaker):
    return svc.create_proposal(speaker, {
        "title": "Designing for trust",
        "description": "How design choices shape trust in civic services.",
        "track": "design-thinking",
        "session_type": "talk",
        "duration": 30,
    })


@pytest.fixture
def make_evaluator(make_user, admin):
    def _make(email, expertise=None):
        user = make_user(email)
        return user, svc.create_evaluator(admin, user.id, expertise)
    return _make


SCORES = {
    "relevance_score": 4,
    "quality_score": 5,
    "innovation_score": 3,
    "impact_score": 4,
    "feasibility_score": 5,
    "comments": "Clear abstract, strong speaker.",
    "recommendation": "accept",
}


@pytest.fixture
def submission():
    return dict(SCORES)
