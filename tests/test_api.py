from conference.extensions import db
from conference.models.evaluation import Evaluation
from conference.services import evaluations as svc


def login(client, email, password="password123"):
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return resp


PROPOSAL = {
    "title": "Culture eats process",
    "description": "Stories from three design teams.",
    "track": "culture",
    "session_type": "panel",
    "duration": 45,
}


def test_signup_bootstraps_admin_then_attendees(client):
    body = {"name": "First", "email": "first@example.com", "password": "password123", "confirm": "password123"}
    resp = client.post("/auth/signup", json=body)
    assert resp.status_code == 201
    assert resp.get_json()["role"] == "admin"

    body.update(email="second@example.com", name="Second")
    resp = client.post("/auth/signup", json=body)
    assert resp.get_json()["role"] == "attendee"

    assert client.post("/auth/signup", json=body).status_code == 409


def test_bad_login(client, speaker):
    resp = client.post("/auth/login", json={"email": speaker.email, "password": "wrong-password"})
    assert resp.status_code == 401


def test_anonymous_requests_are_unauthorized(client):
    assert client.post("/proposals", json=PROPOSAL).status_code == 401
    resp = client.get("/admin/evaluators")
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Unauthorized"}


def test_proposal_submission_validation(client, speaker):
    login(client, speaker.email)
    resp = client.post("/proposals", json=dict(PROPOSAL, track="astrology"))
    assert resp.status_code == 400
    assert "track" in resp.get_json()["errors"]

    resp = client.post("/proposals", json=PROPOSAL)
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["status"] == "submitted"
    assert created["user_id"] == speaker.id

    mine = client.get("/proposals/mine").get_json()
    assert [p["id"] for p in mine] == [created["id"]]
    # owners see their proposal but not the review summary
    detail = client.get(f"/proposals/{created['id']}").get_json()
    assert "review" not in detail


def test_non_string_text_fields_are_rejected(client, admin, speaker, proposal, make_evaluator, submission):
    reviewer, evaluator = make_evaluator("reviewer@example.com")
    evaluation = svc.assign_evaluator(admin, proposal.id, evaluator.id)
    login(client, reviewer.email)
    resp = client.post(f"/evaluations/{evaluation.id}/submit", json=dict(submission, comments=12345678901))
    assert resp.status_code == 400
    assert "comments" in resp.get_json()["errors"]
    assert db.session.get(Evaluation, evaluation.id).status == "pending"
    client.post("/auth/logout")

    login(client, speaker.email)
    resp = client.post("/proposals", json=dict(PROPOSAL, title=42, description=True))
    assert resp.status_code == 400
    assert set(resp.get_json()["errors"]) == {"title", "description"}
    client.post("/auth/logout")

    resp = client.post("/auth/login", json={"email": speaker.email, "password": 12345678})
    assert resp.status_code == 400
    assert "password" in resp.get_json()["errors"]


def test_speakers_cannot_use_admin_routes(client, speaker, proposal):
    login(client, speaker.email)
    resp = client.get("/proposals")
    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Forbidden"}
    assert client.post(f"/proposals/{proposal.id}/decision", json={"status": "accepted"}).status_code == 403
    assert client.post("/admin/assign-evaluator", json={"proposal_id": proposal.id, "evaluator_id": 1}).status_code == 403


def test_full_review_flow(app, client, admin, speaker, proposal, make_user):
    reviewer = make_user("reviewer@example.com")
    login(client, admin.email)

    resp = client.post("/admin/evaluators", json={"user_id": reviewer.id, "expertise": "design"})
    assert resp.status_code == 201
    evaluator_id = resp.get_json()["id"]

    resp = client.post("/admin/assign-evaluator", json={"proposal_id": proposal.id, "evaluator_id": evaluator_id})
    assert resp.status_code == 201
    evaluation_id = resp.get_json()["id"]
    assert client.post("/admin/assign-evaluator", json={"proposal_id": proposal.id, "evaluator_id": evaluator_id}).status_code == 409

    resp = client.post(f"/proposals/{proposal.id}/decision", json={"status": "accepted"})
    assert resp.status_code == 409

    client.post("/auth/logout")
    login(client, reviewer.email)
    queue = client.get("/evaluations/mine").get_json()
    assert [e["id"] for e in queue["evaluations"]["pending"]] == [evaluation_id]
    assert queue["evaluations"]["pending"][0]["proposal"]["title"] == proposal.title

    assert client.post(f"/evaluations/{evaluation_id}/start").get_json()["status"] == "in-progress"

    payload = {
        "relevance_score": 3, "quality_score": 3, "innovation_score": 4,
        "impact_score": 4, "feasibility_score": 4,
        "comments": "short",
        "recommendation": "needs-revision",
    }
    resp = client.post(f"/evaluations/{evaluation_id}/submit", json=payload)
    assert resp.status_code == 400
    assert "comments" in resp.get_json()["errors"]

    resp = client.post(f"/evaluations/{evaluation_id}/submit", json=dict(payload, impact_score=4.5, comments="Needs a sharper outline."))
    assert resp.status_code == 400
    assert "impact_score" in resp.get_json()["errors"]

    resp = client.post(f"/evaluations/{evaluation_id}/submit", json=dict(payload, comments="Needs a sharper outline."))
    assert resp.status_code == 200
    done = resp.get_json()
    assert done["status"] == "completed"
    assert done["overall_score"] == 4

    client.post("/auth/logout")
    login(client, admin.email)
    review = client.get(f"/proposals/{proposal.id}/evaluations").get_json()["review"]
    assert review == {
        "status": "completed",
        "completed_count": 1,
        "total_count": 1,
        "average_score": 4.0,
        "recommendations": {"accept": 0, "reject": 0, "needs-revision": 1},
        "can_decide": True,
    }

    listing = client.get("/proposals").get_json()
    assert listing[0]["review"]["can_decide"] is True

    resp = client.post(f"/proposals/{proposal.id}/decision", json={"status": "accepted", "review_notes": "Welcome aboard"})
    assert resp.status_code == 200
    decided = resp.get_json()
    assert decided["status"] == "accepted"
    assert decided["session"]["proposal_id"] == proposal.id

    assert client.post(f"/proposals/{proposal.id}/decision", json={"status": "rejected"}).status_code == 409

    workload = client.get("/admin/evaluators").get_json()
    assert workload[0]["assigned_count"] == 1
    assert workload[0]["completed_count"] == 1


def test_evaluator_status_toggle(client, admin, make_user):
    reviewer = make_user("reviewer@example.com")
    login(client, admin.email)
    evaluator_id = client.post("/admin/evaluators", json={"user_id": reviewer.id}).get_json()["id"]
    resp = client.post(f"/admin/evaluators/{evaluator_id}/status", json={"status": "inactive"})
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "inactive"
    assert client.post(f"/admin/evaluators/{evaluator_id}/status", json={"status": "retired"}).status_code == 400


def test_unknown_evaluation_is_404(client, make_user):
    reviewer = make_user("reviewer@example.com", role="evaluator")
    login(client, reviewer.email)
    assert client.post("/evaluations/12345/start").status_code == 404
    assert client.get("/evaluations/mine").get_json()["evaluator"] is None
