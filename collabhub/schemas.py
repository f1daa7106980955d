from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, constr

from .enums import Action, ResourceKind, Role, Status

# Snapshots are built by the caller right before a decision and thrown away
# afterwards, so every model here is frozen.


class Actor(BaseModel):
    """The user attempting an action, with their already-resolved workspace role."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: constr(min_length=1)
    role: Role


class Task(BaseModel):
    """Task snapshot. The creator owns the task."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[ResourceKind] = ResourceKind.TASK

    id: constr(min_length=1)
    creator_id: constr(min_length=1)
    assignee_id: Optional[constr(min_length=1)] = None
    status: Status = Status.TODO

    @property
    def owner_id(self) -> str:
        return self.creator_id


class Document(BaseModel):
    """Document snapshot. The author owns the document; documents have no assignee."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[ResourceKind] = ResourceKind.DOCUMENT

    id: constr(min_length=1)
    author_id: constr(min_length=1)
    title: Optional[str] = None

    @property
    def owner_id(self) -> str:
        return self.author_id


class File(BaseModel):
    """Uploaded file snapshot. The uploader owns the file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[ResourceKind] = ResourceKind.FILE

    id: constr(min_length=1)
    uploaded_by_id: constr(min_length=1)
    name: Optional[str] = None

    @property
    def owner_id(self) -> str:
        return self.uploaded_by_id


class Channel(BaseModel):
    """Chat channel snapshot.

    ``owner_id`` is the single authoritative ownership attribute for channels.
    It is ``None`` when the owner is unknown, in which case no MEMBER
    qualifies as owner.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[ResourceKind] = ResourceKind.CHANNEL

    id: constr(min_length=1)
    name: constr(min_length=1)
    owner_id: Optional[constr(min_length=1)] = None


Resource = Union[Task, Document, File, Channel]


class TransitionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_status: Status
    requested_status: Status


class PermissionQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Action
    actor: Actor
    resource: Resource


class TransitionResult(BaseModel):
    """Outcome of a transition validation.

    ``allowed`` always lists the legal next statuses of the current status in
    nominal order, so callers can render the alternatives without a second call.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: Optional[str] = None
    allowed: List[Status] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{isValid, error?}`` shape handed to HTTP callers."""
        payload: Dict[str, Any] = {"isValid": self.is_valid}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class TaskPermissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    can_view: bool
    can_update_status: bool
    can_delete: bool
    can_assign: bool


class ChannelPermissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    can_rename: bool
    can_delete: bool
