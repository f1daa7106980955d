"""
Exceptions for callers that reject requests by raising.

The engine itself returns decisions as values. These helpers turn a negative
decision into an exception with a stable error code at the caller's boundary.
"""

from __future__ import annotations

from typing import Optional, Union

from collabhub.enums import Action, Status
from collabhub.schemas import Actor, Resource

from .permissions import PermissionConfig, can_perform
from .transitions import validate_transition


class PolicyError(Exception):
    """
    Raised when a request is rejected by policy.

    Attributes:
        code: Stable error code for programmatic handling
        message: Human-readable error description
    """

    status_code = 400

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "error": "policy_violation",
            "code": self.code,
            "message": self.message,
        }


class InvalidTransitionError(PolicyError):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(code="INVALID_TRANSITION", message=message)


class PermissionDeniedError(PolicyError):
    status_code = 403

    def __init__(self, message: str):
        super().__init__(code="PERMISSION_DENIED", message=message)


def require_transition(
    current: Union[Status, str], requested: Union[Status, str]
) -> None:
    """Raise InvalidTransitionError unless the transition is legal."""
    result = validate_transition(current, requested)
    if not result.is_valid:
        raise InvalidTransitionError(result.error)


def require_permission(
    action: Union[Action, str],
    resource: Resource,
    actor: Actor,
    config: Optional[PermissionConfig] = None,
    message: Optional[str] = None,
) -> None:
    """Raise PermissionDeniedError unless ``actor`` may perform ``action``."""
    if not can_perform(action, resource, actor, config):
        action = Action(action)
        raise PermissionDeniedError(
            message
            or f"Action '{action.value}' is not permitted on "
            f"{resource.kind.value} '{resource.id}'"
        )
