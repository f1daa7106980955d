"""
CollabHub

Task status progression and permission decisions for CollabHub workspaces.
"""

import importlib.metadata

__version__ = importlib.metadata.version("collabhub")

from .enums import Action, ResourceKind, Role, Status
from .schemas import (
    Actor,
    Channel,
    ChannelPermissions,
    Document,
    File,
    PermissionQuery,
    Task,
    TaskPermissions,
    TransitionRequest,
    TransitionResult,
)

__all__ = [
    "Action",
    "Actor",
    "Channel",
    "ChannelPermissions",
    "Document",
    "File",
    "PermissionQuery",
    "ResourceKind",
    "Role",
    "Status",
    "Task",
    "TaskPermissions",
    "TransitionRequest",
    "TransitionResult",
]
