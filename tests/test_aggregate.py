from types import SimpleNamespace

from conference.services.scoring import aggregate, can_decide


def ev(status="pending", overall_score=None, recommendation=None):
    return SimpleNamespace(status=status, overall_score=overall_score, recommendation=recommendation)


def test_no_evaluations_is_not_assigned():
    out = aggregate([])
    assert out["status"] == "not-assigned"
    assert out["completed_count"] == 0
    assert out["total_count"] == 0
    assert out["average_score"] is None


def test_nothing_completed_is_pending():
    out = aggregate([ev(), ev(), ev()])
    assert out["status"] == "pending"
    assert out["completed_count"] == 0
    assert out["total_count"] == 3
    assert out["average_score"] is None


def test_opened_but_unfinished_reviews_are_still_pending():
    out = aggregate([ev("in-progress"), ev("pending")])
    assert out["status"] == "pending"


def test_partially_completed_is_in_progress():
    out = aggregate([ev("completed", 4), ev("completed", 5), ev("in-progress")])
    assert out["status"] == "in-progress"
    assert out["completed_count"] == 2
    assert out["total_count"] == 3
    assert out["average_score"] == 4.5


def test_all_completed():
    out = aggregate([ev("completed", 3), ev("completed", 5)])
    assert out["status"] == "completed"
    assert out["average_score"] == 4.0


def test_average_is_rounded_to_one_decimal():
    out = aggregate([ev("completed", 4), ev("completed", 4), ev("completed", 5)])
    assert out["average_score"] == 4.3


def test_accepts_plain_dicts():
    out = aggregate([{"status": "completed", "overall_score": 2}, {"status": "pending"}])
    assert out["status"] == "in-progress"
    assert out["average_score"] == 2.0


def test_divergent_recommendations_are_only_counted():
    out = aggregate([
        ev("completed", 5, "accept"),
        ev("completed", 4, "accept"),
        ev("completed", 1, "reject"),
    ])
    assert out["status"] == "completed"
    assert out["recommendations"] == {"accept": 2, "reject": 1, "needs-revision": 0}


def test_gate_open_for_completed_reviews_on_open_proposal():
    summary = aggregate([ev("completed", 3), ev("completed", 5)])
    assert can_decide("submitted", summary) is True
    assert can_decide("under-review", summary) is True


def test_gate_closed_for_finalized_proposal():
    summary = aggregate([ev("completed", 3)])
    assert can_decide("accepted", summary) is False
    assert can_decide("rejected", summary) is False


def test_gate_closed_until_every_review_is_in():
    assert can_decide("submitted", aggregate([])) is False
    assert can_decide("submitted", aggregate([ev()])) is False
    assert can_decide("submitted", aggregate([ev("completed", 4), ev("in-progress")])) is False
