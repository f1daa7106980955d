"""
CollabHub canonical enums.

These enums define the allowed values for statuses, roles, resource kinds and
actions. Callers MUST map storage or request values into these sets before
asking the engine for a decision.
"""

from enum import Enum


class Status(str, Enum):
    """Task lifecycle status, declared in nominal progression order."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"


class Role(str, Enum):
    """Workspace-scoped membership role."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"


class ResourceKind(str, Enum):
    """Kinds of workspace resources subject to permission decisions."""

    TASK = "task"
    DOCUMENT = "document"
    FILE = "file"
    CHANNEL = "channel"


class Action(str, Enum):
    """Actions an actor may request on a resource."""

    VIEW = "view"
    UPDATE_STATUS = "update-status"
    ASSIGN = "assign"
    EDIT = "edit"
    RENAME = "rename"
    DELETE = "delete"
