"""
Forward-only status progression for tasks.

Tasks move TODO -> IN_PROGRESS -> REVIEW -> DONE and may skip ahead, but never
move backwards. DONE is terminal: completed work needs a new task rather than
a status rollback.

Transition table:
- TODO -> IN_PROGRESS, REVIEW, DONE
- IN_PROGRESS -> REVIEW, DONE
- REVIEW -> DONE
- DONE -> (none)

Requesting the current status is a no-op and always valid. Every function here
is pure; a rejected transition is reported through ``TransitionResult``
rather than raised.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional, Union

import structlog

from collabhub.enums import Status
from collabhub.schemas import TransitionRequest, TransitionResult

logger = structlog.get_logger()

StatusLike = Union[Status, str]

STATUS_ORDER: List[Status] = [
    Status.TODO,
    Status.IN_PROGRESS,
    Status.REVIEW,
    Status.DONE,
]

STATUS_PROGRESSION: Dict[Status, FrozenSet[Status]] = {
    Status.TODO: frozenset({Status.IN_PROGRESS, Status.REVIEW, Status.DONE}),
    Status.IN_PROGRESS: frozenset({Status.REVIEW, Status.DONE}),
    Status.REVIEW: frozenset({Status.DONE}),
    Status.DONE: frozenset(),
}

STATUS_LABELS: Dict[Status, str] = {
    Status.TODO: "To Do",
    Status.IN_PROGRESS: "In Progress",
    Status.REVIEW: "Review",
    Status.DONE: "Done",
}

TERMINAL_MESSAGE = "None (task is complete, no further transitions)"


def _coerce(status: StatusLike) -> Status:
    """Accept either a Status member or its string value.

    Raises:
        ValueError: if the value is not a known status
    """
    return status if isinstance(status, Status) else Status(status)


def status_order() -> List[Status]:
    """Nominal progression order, for UI display."""
    return list(STATUS_ORDER)


def status_label(status: StatusLike) -> str:
    return STATUS_LABELS[_coerce(status)]


def allowed_next_statuses(current: StatusLike) -> FrozenSet[Status]:
    """Return the statuses reachable from ``current`` in a single move."""
    return STATUS_PROGRESSION[_coerce(current)]


def is_final_status(status: StatusLike) -> bool:
    """True when the status has no outgoing transitions."""
    return not allowed_next_statuses(status)


def is_valid_transition(current: StatusLike, requested: StatusLike) -> bool:
    current = _coerce(current)
    requested = _coerce(requested)
    if current == requested:
        return True
    return requested in STATUS_PROGRESSION[current]


def _ordered(statuses: FrozenSet[Status]) -> List[Status]:
    return [s for s in STATUS_ORDER if s in statuses]


def validate_transition(current: StatusLike, requested: StatusLike) -> TransitionResult:
    """
    Validate a status change and explain a rejection.

    Args:
        current: The status the task holds now
        requested: The status the caller wants to move to

    Returns:
        A TransitionResult. On rejection ``error`` names both statuses and
        lists the legal alternatives, or says the task is complete when
        ``current`` is terminal.
    """
    current = _coerce(current)
    requested = _coerce(requested)
    allowed = _ordered(STATUS_PROGRESSION[current])

    if is_valid_transition(current, requested):
        return TransitionResult(is_valid=True, allowed=allowed)

    alternatives = ", ".join(s.value for s in allowed) or TERMINAL_MESSAGE
    logger.debug(
        "status_transition_rejected",
        current_status=current.value,
        requested_status=requested.value,
    )
    return TransitionResult(
        is_valid=False,
        error=(
            f"Cannot move from {current.value} to {requested.value}. "
            f"Allowed transitions: {alternatives}"
        ),
        allowed=allowed,
    )


def validate_request(request: TransitionRequest) -> TransitionResult:
    return validate_transition(request.current_status, request.requested_status)


def next_immediate_status(current: StatusLike) -> Optional[Status]:
    """
    Return the next status for an "advance one step" action.

    This is the first status after ``current`` in nominal order that is also
    a legal move, or None when ``current`` is terminal.
    """
    current = _coerce(current)
    allowed = STATUS_PROGRESSION[current]
    for status in STATUS_ORDER[STATUS_ORDER.index(current) + 1 :]:
        if status in allowed:
            return status
    return None
