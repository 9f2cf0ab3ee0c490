"""
Pure unit tests for detector_relay/core/scoring.py.
"""

import math

import pytest

from detector_relay.core.errors import InvalidScoreError, ScoreNotFoundError
from detector_relay.core.scoring import extract_ai_percentage, find_raw_score, normalize_probability


# ---------------------------------------------------------------------------
# normalize_probability
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, 0),
        (0.5, 50),
        (1, 100),
        (0.123456, 12.35),
        (2.125, 2.13),
        (1.5, 1.5),
        (42.567, 42.57),
        (100, 100),
    ],
)
def test_normalize_probability(raw, expected):
    assert normalize_probability(raw) == expected


@pytest.mark.parametrize("raw", [-0.01, 100.01, 250, math.nan, math.inf, -math.inf])
def test_normalize_probability_rejects(raw):
    with pytest.raises(InvalidScoreError):
        normalize_probability(raw)


# ---------------------------------------------------------------------------
# Candidate lookup order
# ---------------------------------------------------------------------------


def test_ai_probability_wins_over_score():
    assert extract_ai_percentage({"score": 0.1, "ai_probability": 0.9}) == 90


@pytest.mark.parametrize(
    "response, source",
    [
        ({"aiProbability": 0.2, "score": 0.9}, "aiProbability"),
        ({"score": 0.2, "confidence": 0.9}, "score"),
        ({"confidence": 0.2, "result": {"score": 0.9}}, "confidence"),
        ({"result": {"score": 0.2}, "tasks": [{"score": 0.9}]}, "result.score"),
        ({"tasks": [{"score": 0.2}], "models": [{"score": 0.9}]}, "tasks[].score"),
        ({"models": [{"score": 0.2}]}, "models[].score"),
    ],
)
def test_first_matching_candidate_is_used(response, source):
    assert find_raw_score(response) == (source, 0.2)


def test_list_scan_takes_first_numeric_element():
    response = {"tasks": [{"name": "a"}, "junk", {"score": "0.7"}, {"score": 12}, {"score": 40}]}
    assert extract_ai_percentage(response) == 12


def test_non_numeric_candidates_are_skipped():
    response = {"ai_probability": "0.9", "aiProbability": None, "score": True, "confidence": 0.25}
    assert extract_ai_percentage(response) == 25


def test_result_that_is_not_an_object_is_skipped():
    assert extract_ai_percentage({"result": 0.9, "models": [{"score": 0.4}]}) == 40


def test_selected_invalid_score_does_not_fall_through():
    # The first numeric candidate is final even if it fails normalization
    with pytest.raises(InvalidScoreError):
        extract_ai_percentage({"ai_probability": -1, "score": 0.5})


@pytest.mark.parametrize(
    "response",
    [
        {},
        {"label": "ai"},
        {"tasks": [], "models": [{"name": "x"}]},
        {"tasks": {"score": 0.5}},
        [0.5],
        None,
        "0.5",
    ],
)
def test_score_not_found(response):
    with pytest.raises(ScoreNotFoundError):
        extract_ai_percentage(response)


def test_integer_too_large_for_float_is_invalid():
    with pytest.raises(InvalidScoreError):
        extract_ai_percentage({"score": 10 ** 400})
