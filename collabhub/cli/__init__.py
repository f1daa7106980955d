"""
Command Line Interface for CollabHub.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import get_settings
from ..enums import Role, Status
from ..log import configure_logging
from ..policy import permissions, transitions
from ..schemas import Actor, Channel, Document, File, Task

app = typer.Typer(help="CollabHub - task status and permission engine")
console = Console()

OWNER_ID = "owner"
OTHER_ID = "someone-else"


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    configure_logging()


def _parse_status(value: str) -> Status:
    try:
        return Status(value.upper())
    except ValueError:
        valid = ", ".join(s.value for s in Status)
        raise typer.BadParameter(f"'{value}' is not a status. Choose from: {valid}") from None


@app.command("transitions")
def show_transitions(
    status: Optional[str] = typer.Argument(None, help="Only show this status"),
):
    """Show the allowed next statuses for each status."""
    statuses = [_parse_status(status)] if status else transitions.status_order()

    table = Table(title="Status Progression", show_header=True, header_style="bold magenta")
    table.add_column("Status", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Allowed next", style="green")
    table.add_column("Advance to")

    for current in statuses:
        allowed = [s.value for s in transitions.status_order() if s in transitions.allowed_next_statuses(current)]
        nxt = transitions.next_immediate_status(current)
        table.add_row(
            current.value,
            transitions.status_label(current),
            ", ".join(allowed) or "(terminal)",
            nxt.value if nxt else "-",
        )

    console.print(table)


@app.command("check-transition")
def check_transition(
    current: str = typer.Argument(..., help="Current status"),
    requested: str = typer.Argument(..., help="Requested status"),
):
    """Check whether a status change is legal."""
    result = transitions.validate_transition(_parse_status(current), _parse_status(requested))
    if result.is_valid:
        console.print(f"✅ {current.upper()} -> {requested.upper()} is allowed")
        return
    console.print(f"❌ {result.error}")
    raise typer.Exit(code=1)


def _sample_resources():
    return [
        Task(id="task-1", creator_id=OWNER_ID, assignee_id=OWNER_ID),
        Document(id="doc-1", author_id=OWNER_ID),
        File(id="file-1", uploaded_by_id=OWNER_ID),
        Channel(id="channel-1", name="design", owner_id=OWNER_ID),
    ]


def _mark(allowed: bool) -> str:
    return "[green]yes[/green]" if allowed else "[red]no[/red]"


@app.command("policy")
def show_policy():
    """Render the permission matrix for owners and non-owners of each role."""
    config = permissions.PermissionConfig(
        reserved_channel_names=get_settings().reserved_channels
    )

    table = Table(title="Permission Matrix", show_header=True, header_style="bold magenta")
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("Action", no_wrap=True)
    for role in Role:
        table.add_column(role.value)
    table.add_column("Owner (MEMBER)")

    owner = Actor(id=OWNER_ID, role=Role.MEMBER)
    for resource in _sample_resources():
        for action in permissions.actions_for(resource.kind):
            cells = [
                _mark(permissions.can_perform(action, resource, Actor(id=OTHER_ID, role=role), config))
                for role in Role
            ]
            cells.append(_mark(permissions.can_perform(action, resource, owner, config)))
            table.add_row(resource.kind.value, action.value, *cells)

    console.print(table)
    reserved = ", ".join(sorted(config.reserved_channel_names)) or "(none)"
    console.print(f"Reserved channels (never renamed or deleted): {reserved}")


if __name__ == "__main__":
    app()
