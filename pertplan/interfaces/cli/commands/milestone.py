"""Milestone CLI commands."""

import typer

from pertplan.domain.project import (
    AddMilestone,
    DeleteMilestone,
    UpdateMilestone,
)
from pertplan.interfaces.cli.common import (
    FileOption,
    apply_and_save,
    print_success,
    warn_if_unchanged,
)

app = typer.Typer(help="Add, rename, enable/disable and delete milestones")


@app.command("add")
def add(file: FileOption = None) -> None:
    """Append a new milestone named after its letter."""
    _, after = apply_and_save(file, AddMilestone())
    milestone = after.milestones[-1]
    print_success(f"Added milestone {milestone.id}: {milestone.name}")


@app.command("rename")
def rename(
    milestone_id: str = typer.Argument(..., help="Milestone letter, e.g. A"),
    name: str = typer.Argument(..., help="New name"),
    file: FileOption = None,
) -> None:
    """Rename a milestone."""
    before, after = apply_and_save(
        file, UpdateMilestone(milestone_id=milestone_id, field="name", value=name)
    )
    if not warn_if_unchanged(before, after, f"Milestone {milestone_id}"):
        print_success(f"Renamed milestone {milestone_id}")


def _set_enabled(milestone_id: str, enabled: bool, file: FileOption) -> None:
    before, after = apply_and_save(
        file, UpdateMilestone(milestone_id=milestone_id, field="isEnabled", value=enabled)
    )
    if not warn_if_unchanged(before, after, f"Milestone {milestone_id}"):
        state = "enabled" if enabled else "disabled"
        print_success(f"Milestone {milestone_id} {state}")


@app.command("enable")
def enable(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    file: FileOption = None,
) -> None:
    """Include a milestone in totals and exports."""
    _set_enabled(milestone_id, True, file)


@app.command("disable")
def disable(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    file: FileOption = None,
) -> None:
    """Exclude a milestone (and all its tasks) from totals and exports."""
    _set_enabled(milestone_id, False, file)


@app.command("delete")
def delete(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    file: FileOption = None,
) -> None:
    """Delete a milestone and its tasks; later milestones are relettered."""
    if not yes:
        typer.confirm(
            f"Delete milestone {milestone_id} and all its tasks?",
            abort=True,
        )
    before, after = apply_and_save(file, DeleteMilestone(milestone_id=milestone_id))
    if not warn_if_unchanged(before, after, f"Milestone {milestone_id}"):
        print_success(f"Deleted milestone {milestone_id}")
