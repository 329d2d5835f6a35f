from itertools import permutations

import pytest

from conference.services.scoring import CRITERIA, compute_overall_score


@pytest.mark.parametrize("scores,expected", [
    ([5, 5, 5, 5, 5], 5),
    ([1, 1, 1, 1, 1], 1),
    ([3, 3, 3, 3, 4], 3),  # 3.2
    ([3, 3, 3, 4, 4], 3),  # 3.4
    ([3, 3, 4, 4, 4], 4),  # 3.6
    ([3, 3, 3, 3, 5], 3),  # 3.4
    ([4, 5, 3, 4, 5], 4),  # 4.2
])
def test_overall_score_is_rounded_mean(scores, expected):
    assert compute_overall_score(scores) == expected


def test_overall_score_ignores_order():
    base = (1, 2, 4, 5, 5)
    results = {compute_overall_score(list(p)) for p in permutations(base)}
    assert results == {compute_overall_score(list(base))}


def test_overall_score_from_mapping():
    scores = dict(zip(CRITERIA, [3, 3, 4, 4, 4]))
    assert compute_overall_score(scores) == 4


def test_mapping_with_custom_criteria_rounds_half_up():
    # 3.5 goes up, not to the even neighbour
    assert compute_overall_score({"clarity": 3, "originality": 4}) == 4
    assert compute_overall_score({"clarity": 1, "originality": 2}) == 2


@pytest.mark.parametrize("scores", [
    [0, 3, 3, 3, 3],
    [6, 3, 3, 3, 3],
    [3, 3, 3, 3],
    [3, 3, 3, 3, 3, 3],
    [3, 3, 3.5, 3, 3],
    [3, 3, "4", 3, 3],
    [3, 3, None, 3, 3],
    [True, 3, 3, 3, 3],
    {},
])
def test_invalid_scores_fail_loudly(scores):
    with pytest.raises(ValueError):
        compute_overall_score(scores)
