"""
Status-change authorization for a task update.

Composes the permission check and the transition check in the order a task
update handler applies them: permission first (403), then progression (400).
A request for the status the task already holds changes nothing and is
allowed without either check.
"""

from __future__ import annotations

from typing import Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict

from collabhub.enums import Action, Status
from collabhub.schemas import Actor, Task

from .errors import InvalidTransitionError, PermissionDeniedError
from .permissions import PermissionConfig, can_perform
from .transitions import validate_transition

logger = structlog.get_logger()

STATUS_PERMISSION_MESSAGE = "You don't have permission to update this task's status"


class StatusChangeDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    allowed: bool
    current_status: Status
    requested_status: Status
    code: Optional[str] = None
    message: Optional[str] = None
    status_code: int = 200

    @property
    def is_noop(self) -> bool:
        return self.current_status == self.requested_status

    def raise_for_denial(self) -> None:
        """Raise the matching PolicyError if the change was rejected."""
        if self.allowed:
            return
        if self.code == "PERMISSION_DENIED":
            raise PermissionDeniedError(self.message)
        raise InvalidTransitionError(self.message)


def authorize_status_change(
    task: Task,
    requested: Union[Status, str],
    actor: Actor,
    config: Optional[PermissionConfig] = None,
) -> StatusChangeDecision:
    requested = Status(requested)
    log = logger.bind(
        task_id=task.id,
        actor_id=actor.id,
        current_status=task.status.value,
        requested_status=requested.value,
    )

    if requested == task.status:
        return StatusChangeDecision(
            allowed=True, current_status=task.status, requested_status=requested
        )

    if not can_perform(Action.UPDATE_STATUS, task, actor, config):
        log.info("status_change_denied", reason="permission")
        return StatusChangeDecision(
            allowed=False,
            current_status=task.status,
            requested_status=requested,
            code="PERMISSION_DENIED",
            message=STATUS_PERMISSION_MESSAGE,
            status_code=PermissionDeniedError.status_code,
        )

    result = validate_transition(task.status, requested)
    if not result.is_valid:
        log.info("status_change_denied", reason="transition")
        return StatusChangeDecision(
            allowed=False,
            current_status=task.status,
            requested_status=requested,
            code="INVALID_TRANSITION",
            message=result.error,
            status_code=InvalidTransitionError.status_code,
        )

    log.info("status_change_authorized")
    return StatusChangeDecision(
        allowed=True, current_status=task.status, requested_status=requested
    )
