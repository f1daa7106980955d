"""
Permission policy for workspace resources.

This module implements the single policy table that decides whether an actor
may perform an action on a task, document, file or channel. Decisions depend
only on the actor's already-resolved workspace role, the actor id, and the
ownership metadata carried by the resource snapshot.

Policy Rules:
- VIEWER may only view. Every other action is denied to viewers.
- Task update-status: the assignee, or anyone when the task is unassigned
- Task delete: only the creator, whatever the role
- Task assign: ADMIN, or the creator
- Document edit / delete: ADMIN, or the author
- Document rename: only the author. ADMIN does not override this.
- File rename: only the uploader
- File delete: ADMIN, or the uploader
- Channel rename / delete: ADMIN, or the channel owner. Reserved channels
  (default "general") can never be renamed or deleted.
- Any (resource kind, action) pair not listed is denied.

Configuration:
- COLLABHUB_RESERVED_CHANNEL_NAMES: Comma-separated reserved channel names.

All functions are total and return False for "not permitted".
"""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict

from collabhub.enums import Action, ResourceKind, Role
from collabhub.schemas import (
    Actor,
    Channel,
    ChannelPermissions,
    PermissionQuery,
    Resource,
    Task,
    TaskPermissions,
)

logger = structlog.get_logger()

DEFAULT_RESERVED_CHANNELS = frozenset({"general"})


class PermissionConfig(BaseModel):
    """Configuration for permission evaluation."""

    model_config = ConfigDict(frozen=True)

    reserved_channel_names: FrozenSet[str] = DEFAULT_RESERVED_CHANNELS


def _get_default_permission_config() -> PermissionConfig:
    """
    Build the default config from environment settings.

    Settings are imported lazily so the policy table stays importable without
    touching the environment.
    """
    from collabhub.config import get_settings

    return PermissionConfig(reserved_channel_names=get_settings().reserved_channels)


Rule = Callable[[Resource, Actor, PermissionConfig], bool]


def _is_owner(resource: Resource, actor_id: str) -> bool:
    owner_id = resource.owner_id
    return owner_id is not None and owner_id == actor_id


def _always(resource: Resource, actor: Actor, config: PermissionConfig) -> bool:
    return True


def _owner_only(resource: Resource, actor: Actor, config: PermissionConfig) -> bool:
    return _is_owner(resource, actor.id)


def _admin_or_owner(resource: Resource, actor: Actor, config: PermissionConfig) -> bool:
    return actor.role == Role.ADMIN or _is_owner(resource, actor.id)


def _assignee_or_unassigned(
    resource: Resource, actor: Actor, config: PermissionConfig
) -> bool:
    return evaluate_task_status_permission(resource, actor.id)


def _manage_channel(resource: Resource, actor: Actor, config: PermissionConfig) -> bool:
    if is_reserved_channel(resource, config):
        return False
    return _admin_or_owner(resource, actor, config)


POLICY_TABLE: Dict[Tuple[ResourceKind, Action], Rule] = {
    (ResourceKind.TASK, Action.VIEW): _always,
    (ResourceKind.TASK, Action.UPDATE_STATUS): _assignee_or_unassigned,
    (ResourceKind.TASK, Action.DELETE): _owner_only,
    (ResourceKind.TASK, Action.ASSIGN): _admin_or_owner,
    (ResourceKind.DOCUMENT, Action.VIEW): _always,
    (ResourceKind.DOCUMENT, Action.EDIT): _admin_or_owner,
    (ResourceKind.DOCUMENT, Action.RENAME): _owner_only,
    (ResourceKind.DOCUMENT, Action.DELETE): _admin_or_owner,
    (ResourceKind.FILE, Action.VIEW): _always,
    (ResourceKind.FILE, Action.RENAME): _owner_only,
    (ResourceKind.FILE, Action.DELETE): _admin_or_owner,
    (ResourceKind.CHANNEL, Action.VIEW): _always,
    (ResourceKind.CHANNEL, Action.RENAME): _manage_channel,
    (ResourceKind.CHANNEL, Action.DELETE): _manage_channel,
}


def actions_for(kind: ResourceKind) -> Tuple[Action, ...]:
    """Actions the policy table defines for a resource kind, in declaration order."""
    return tuple(action for (k, action) in POLICY_TABLE if k == kind)


def is_reserved_channel(
    channel: Channel, config: Optional[PermissionConfig] = None
) -> bool:
    if config is None:
        config = _get_default_permission_config()
    return channel.name in config.reserved_channel_names


def evaluate_task_status_permission(task: Task, actor_id: str) -> bool:
    """
    Check whether an actor may change a task's status.

    Only the assignee may move an assigned task. An unassigned task may be
    moved by anyone. The role is deliberately not consulted: callers gate
    viewers out before asking (``can_perform`` does this).
    """
    if task.assignee_id is None:
        return True
    return task.assignee_id == actor_id


def evaluate_delete_permission(
    resource: Resource,
    actor_id: str,
    actor_role: Union[Role, str],
    config: Optional[PermissionConfig] = None,
) -> bool:
    """
    Check whether an actor may delete a resource.

    Documents and files: ADMIN, or the owner (author or uploader). Tasks: only
    the creator, whatever the role. Channels: ADMIN or the owner, never a
    reserved channel. VIEWER is always denied. The answer is the delete row of
    the policy table, the same one ``can_perform`` gives.
    """
    actor = Actor(id=actor_id, role=Role(actor_role))
    return can_perform(Action.DELETE, resource, actor, config)


def can_perform(
    action: Union[Action, str],
    resource: Resource,
    actor: Actor,
    config: Optional[PermissionConfig] = None,
) -> bool:
    """
    Decide whether ``actor`` may perform ``action`` on ``resource``.

    This is a pure function: no DB access, no request objects.

    Args:
        action: The requested action (an Action or its string value)
        resource: Snapshot of the task, document, file or channel
        actor: The user and their workspace role
        config: Optional permission configuration. If not provided, reserved
                channel names are read from settings.

    Returns:
        True when permitted, False otherwise.
    """
    action = Action(action)
    rule = POLICY_TABLE.get((resource.kind, action))
    if rule is None:
        allowed = False
    elif actor.role == Role.VIEWER and action != Action.VIEW:
        allowed = False
    else:
        if config is None:
            config = _get_default_permission_config()
        allowed = rule(resource, actor, config)

    if not allowed:
        logger.debug(
            "permission_denied",
            action=action.value,
            resource_kind=resource.kind.value,
            resource_id=resource.id,
            actor_id=actor.id,
            actor_role=actor.role.value,
        )
    return allowed


def check(query: PermissionQuery, config: Optional[PermissionConfig] = None) -> bool:
    return can_perform(query.action, query.resource, query.actor, config)


def permissions_for(
    resource: Resource, actor: Actor, config: Optional[PermissionConfig] = None
) -> Dict[Action, bool]:
    """Evaluate every action defined for the resource kind."""
    if config is None:
        config = _get_default_permission_config()
    return {
        action: can_perform(action, resource, actor, config)
        for action in actions_for(resource.kind)
    }


def task_permissions(
    task: Task, actor: Actor, config: Optional[PermissionConfig] = None
) -> TaskPermissions:
    decisions = permissions_for(task, actor, config)
    return TaskPermissions(
        can_view=decisions[Action.VIEW],
        can_update_status=decisions[Action.UPDATE_STATUS],
        can_delete=decisions[Action.DELETE],
        can_assign=decisions[Action.ASSIGN],
    )


def channel_permissions(
    channel: Channel, actor: Actor, config: Optional[PermissionConfig] = None
) -> ChannelPermissions:
    """Rename/delete flags for rendering a channel's actions menu."""
    if config is None:
        config = _get_default_permission_config()
    return ChannelPermissions(
        can_rename=can_perform(Action.RENAME, channel, actor, config),
        can_delete=can_perform(Action.DELETE, channel, actor, config),
    )
