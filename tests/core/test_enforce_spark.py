"""Spark creation enforcement — registry check first, then policy bounds in order."""

import pytest

from ignite.core.enforce_spark import validate_spark_creation
from ignite.core.errors import NotRegisteredError, PolicyValidationError


def _validate(state, policy, creator="alice", title="Garden", description="Plant vegetables", goal=20):
    return validate_spark_creation(state, policy, creator, title, description, goal)


def test_valid_request_returns_none(state, policy):
    assert _validate(state, policy) is None


def test_unregistered_creator(state, policy):
    error = _validate(state, policy, creator="mallory")
    assert isinstance(error, NotRegisteredError)
    assert error.http_status == 403
    assert error.message == "Not verified"


def test_unregistered_checked_before_title(state, policy):
    error = _validate(state, policy, creator="mallory", title="")
    assert isinstance(error, NotRegisteredError)


@pytest.mark.parametrize("title", ["", "ab", None])
def test_short_title(state, policy, title):
    error = _validate(state, policy, title=title)
    assert isinstance(error, PolicyValidationError)
    assert error.message == "Title too short"
    assert error.field == "title"


def test_three_char_title_accepted(state, policy):
    assert _validate(state, policy, title="abc") is None


def test_short_description(state, policy):
    error = _validate(state, policy, description="too short")
    assert error.message == "Description too short"


def test_ten_char_description_accepted(state, policy):
    assert _validate(state, policy, description="x" * 10) is None


@pytest.mark.parametrize("goal", [4, 101, 0, -5])
def test_goal_out_of_range(state, policy, goal):
    error = _validate(state, policy, goal=goal)
    assert isinstance(error, PolicyValidationError)
    assert error.message == "Goal must be 5-100 tokens"
    assert error.http_status == 400


@pytest.mark.parametrize("goal", [5, 100])
def test_goal_bounds_inclusive(state, policy, goal):
    assert _validate(state, policy, goal=goal) is None


def test_non_integer_goal_rejected(state, policy):
    assert isinstance(_validate(state, policy, goal=20.5), PolicyValidationError)
    assert isinstance(_validate(state, policy, goal=True), PolicyValidationError)


def test_title_checked_before_goal(state, policy):
    error = _validate(state, policy, title="ab", goal=1000)
    assert error.field == "title"


def test_validation_never_mutates_state(state, policy):
    before = dict(state.sparks)
    _validate(state, policy, goal=1000)
    _validate(state, policy)
    assert state.sparks == before
