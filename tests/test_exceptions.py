"""Tests for exception hierarchy."""

import pytest

from roadforge.exceptions import (
    ArtifactError,
    CollaboratorError,
    InvalidInputError,
    RoadforgeError,
    StageFailure,
)


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    def test_base_exception_exists(self):
        """RoadforgeError is the base exception."""
        error = RoadforgeError("test message")
        assert isinstance(error, Exception)
        assert str(error) == "test message"

    @pytest.mark.parametrize(
        "error",
        [
            InvalidInputError(["name is required"]),
            StageFailure("recipe"),
            CollaboratorError("down"),
            ArtifactError("bad file"),
        ],
    )
    def test_all_exceptions_inherit_from_base(self, error):
        """All custom exceptions inherit from RoadforgeError."""
        assert isinstance(error, RoadforgeError)


class TestInvalidInputError:
    """Test InvalidInputError."""

    def test_lists_problems(self):
        """Message joins every problem."""
        error = InvalidInputError(["name is required", "timeline is required"])
        assert error.problems == ["name is required", "timeline is required"]
        assert str(error) == "Invalid project input: name is required; timeline is required"


class TestStageFailure:
    """Test StageFailure."""

    def test_names_stage(self):
        """Message and attribute name the failing stage."""
        error = StageFailure("timeline_estimator", {"type_classifier": "x"})
        assert error.stage == "timeline_estimator"
        assert error.completed == {"type_classifier": "x"}
        assert str(error) == "Stage 'timeline_estimator' failed"

    def test_completed_defaults_empty(self):
        """No completed outputs means an empty dict."""
        assert StageFailure("type_classifier").completed == {}

    def test_completed_is_copied(self):
        """Later changes to the caller's dict do not leak in."""
        completed = {"a": 1}
        error = StageFailure("b", completed)
        completed["b"] = 2
        assert error.completed == {"a": 1}
