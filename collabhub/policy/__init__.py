"""
Decision engine for task status progression and resource permissions.
"""

from .errors import (
    InvalidTransitionError,
    PermissionDeniedError,
    PolicyError,
    require_permission,
    require_transition,
)
from .permissions import (
    PermissionConfig,
    can_perform,
    channel_permissions,
    check,
    evaluate_delete_permission,
    evaluate_task_status_permission,
    permissions_for,
    task_permissions,
)
from .transitions import (
    allowed_next_statuses,
    is_final_status,
    is_valid_transition,
    next_immediate_status,
    status_label,
    status_order,
    validate_request,
    validate_transition,
)
from .workflow import StatusChangeDecision, authorize_status_change

__all__ = [
    "InvalidTransitionError",
    "PermissionConfig",
    "PermissionDeniedError",
    "PolicyError",
    "StatusChangeDecision",
    "allowed_next_statuses",
    "authorize_status_change",
    "can_perform",
    "channel_permissions",
    "check",
    "evaluate_delete_permission",
    "evaluate_task_status_permission",
    "is_final_status",
    "is_valid_transition",
    "next_immediate_status",
    "permissions_for",
    "require_permission",
    "require_transition",
    "status_label",
    "status_order",
    "task_permissions",
    "validate_request",
    "validate_transition",
]
