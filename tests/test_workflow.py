"""Tests for status-change authorization and the raising helpers."""

import pytest

from collabhub.enums import Role, Status
from collabhub.policy import (
    InvalidTransitionError,
    PermissionDeniedError,
    PolicyError,
    authorize_status_change,
    require_permission,
    require_transition,
)
from collabhub.schemas import Actor, Task


def make_task(**overrides) -> Task:
    defaults = {"id": "task-1", "creator_id": "u1", "assignee_id": "u1", "status": Status.TODO}
    defaults.update(overrides)
    return Task(**defaults)


class TestAuthorizeStatusChange:
    def test_assignee_moves_forward(self):
        decision = authorize_status_change(make_task(), "REVIEW", Actor(id="u1", role=Role.MEMBER))
        assert decision.allowed is True
        assert decision.code is None
        assert decision.status_code == 200

    def test_non_assignee_gets_permission_denied(self):
        decision = authorize_status_change(make_task(), "REVIEW", Actor(id="u2", role=Role.ADMIN))
        assert decision.allowed is False
        assert decision.code == "PERMISSION_DENIED"
        assert decision.status_code == 403

    def test_permission_is_checked_before_progression(self):
        task = make_task(status=Status.DONE)
        decision = authorize_status_change(task, "TODO", Actor(id="u2", role=Role.MEMBER))
        assert decision.code == "PERMISSION_DENIED"

    def test_backward_move_gets_invalid_transition(self):
        task = make_task(status=Status.REVIEW)
        decision = authorize_status_change(task, Status.IN_PROGRESS, Actor(id="u1", role=Role.MEMBER))
        assert decision.allowed is False
        assert decision.code == "INVALID_TRANSITION"
        assert decision.status_code == 400
        assert "Allowed transitions: DONE" in decision.message

    def test_same_status_is_a_noop(self):
        task = make_task(status=Status.DONE)
        decision = authorize_status_change(task, "DONE", Actor(id="v1", role=Role.VIEWER))
        assert decision.allowed is True
        assert decision.is_noop is True

    def test_viewer_cannot_move_unassigned_task(self):
        task = make_task(assignee_id=None)
        decision = authorize_status_change(task, "IN_PROGRESS", Actor(id="v1", role=Role.VIEWER))
        assert decision.code == "PERMISSION_DENIED"

    def test_raise_for_denial(self):
        task = make_task(status=Status.REVIEW)
        decision = authorize_status_change(task, "TODO", Actor(id="u1", role=Role.MEMBER))
        with pytest.raises(InvalidTransitionError):
            decision.raise_for_denial()

    def test_raise_for_denial_is_silent_when_allowed(self):
        decision = authorize_status_change(make_task(), "DONE", Actor(id="u1", role=Role.MEMBER))
        decision.raise_for_denial()


class TestRaisingHelpers:
    def test_require_transition_passes(self):
        require_transition("TODO", "DONE")

    def test_require_transition_raises(self):
        with pytest.raises(InvalidTransitionError) as exc_info:
            require_transition("DONE", "REVIEW")
        assert exc_info.value.code == "INVALID_TRANSITION"
        assert "task is complete" in exc_info.value.message

    def test_require_permission_raises(self, document):
        with pytest.raises(PermissionDeniedError) as exc_info:
            require_permission("rename", document, Actor(id="u2", role=Role.ADMIN))
        assert exc_info.value.status_code == 403
        assert "doc-1" in exc_info.value.message

    def test_require_permission_custom_message(self, document):
        message = "Only document author can rename the document"
        with pytest.raises(PermissionDeniedError) as exc_info:
            require_permission("rename", document, Actor(id="u2", role=Role.MEMBER), message=message)
        assert exc_info.value.message == message

    def test_policy_error_to_dict(self):
        error = PolicyError(code="INVALID_TRANSITION", message="nope")
        assert error.to_dict() == {
            "error": "policy_violation",
            "code": "INVALID_TRANSITION",
            "message": "nope",
        }
        assert str(error) == "INVALID_TRANSITION: nope"
