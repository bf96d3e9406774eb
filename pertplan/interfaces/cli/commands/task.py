"""Task CLI commands.

Commands for the task lifecycle inside a milestone: add, edit fields and
estimates, enable/disable, delete, move to another milestone, and show a
task with its PERT figures.
"""

from typing import Optional

import typer

from pertplan.domain.estimation import (
    confidence_bands,
    format_hours,
    is_management_task,
    task_expected,
    task_std_dev,
)
from pertplan.domain.project import (
    AddTask,
    Command,
    DeleteTask,
    EstimateKind,
    MoveTask,
    Task,
    UpdateEstimate,
    UpdateTask,
    apply_command,
    find_task,
)
from pertplan.interfaces.cli.common import (
    FileOption,
    apply_and_save,
    load_project,
    print_error,
    print_success,
    print_warning,
    save_project,
    warn_if_unchanged,
)

app = typer.Typer(help="Task management commands")


# =============================================================================
# Output Formatting Helpers
# =============================================================================


def format_task_output(task: Task) -> str:
    """Format a task with its estimates, confidence bands and Q&A."""
    expected_hours = task_expected(task)
    lines = []

    lines.append("=" * 60)
    lines.append(f"{task.id}  {task.name}")
    lines.append("=" * 60)

    if task.description:
        lines.append(f"\n{task.description}")

    lines.append("")
    lines.append(f"Optimistic (O):   {format_hours(task.estimates.optimistic)}h")
    lines.append(f"Most Likely (M):  {format_hours(task.estimates.most_likely)}h")
    lines.append(f"Pessimistic (P):  {format_hours(task.estimates.pessimistic)}h")
    lines.append(f"Expected (E):     {format_hours(expected_hours)}h")
    lines.append(f"Std. deviation:   {format_hours(task_std_dev(task))}h")
    for band in confidence_bands(expected_hours, task_std_dev(task)):
        lines.append(f"{band.label}: {format_hours(band.low)}h - {format_hours(band.high)}h")

    if task.tests:
        lines.append(f"\n## Tests\n{task.tests}")
    if task.definition_of_done:
        lines.append(f"\n## Definition of Done\n{task.definition_of_done}")

    if task.q_and_a:
        lines.append("\n## Q&A")
        for i, entry in enumerate(task.q_and_a):
            lines.append(f"[{i}] Q: {entry.question}")
            lines.append(f"    A: {entry.answer}")

    if not task.is_enabled:
        lines.append("\n(disabled)")

    lines.append("=" * 60)
    return "\n".join(lines)


def _apply_many(file: FileOption, commands: list[Command]) -> bool:
    """Apply several commands in one load/save cycle. Returns True if anything changed."""
    path, before = load_project(file)
    after = before
    for command in commands:
        after = apply_command(after, command)
    save_project(path, after)
    return after is not before


# =============================================================================
# Commands
# =============================================================================


@app.command("add")
def add(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Task name"),
    file: FileOption = None,
) -> None:
    """Append a new task to a milestone."""
    path, before = load_project(file)
    after = apply_command(before, AddTask(milestone_id=milestone_id))
    if warn_if_unchanged(before, after, f"Milestone {milestone_id}"):
        return

    milestone = next(m for m in after.milestones if m.id == milestone_id)
    task_id = milestone.tasks[-1].id
    if name is not None:
        after = apply_command(
            after,
            UpdateTask(milestone_id=milestone_id, task_id=task_id, field="name", value=name),
        )
    save_project(path, after)
    print_success(f"Added task {task_id}")


@app.command("update")
def update(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id, e.g. A2"),
    name: Optional[str] = typer.Option(None, "--name", "-n"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    tests: Optional[str] = typer.Option(None, "--tests", "-t"),
    definition_of_done: Optional[str] = typer.Option(None, "--dod", help="Definition of done"),
    file: FileOption = None,
) -> None:
    """Edit a task's text fields."""
    fields = {
        "name": name,
        "description": description,
        "tests": tests,
        "definitionOfDone": definition_of_done,
    }
    commands: list[Command] = [
        UpdateTask(milestone_id=milestone_id, task_id=task_id, field=field, value=value)
        for field, value in fields.items()
        if value is not None
    ]
    if not commands:
        print_error("Nothing to update. Pass at least one of --name, --description, --tests, --dod.")
        raise typer.Exit(1)

    if _apply_many(file, commands):
        print_success(f"Updated task {task_id}")
    else:
        print_warning(f"Task {task_id} in milestone {milestone_id} not found; nothing changed.")


@app.command("estimate")
def estimate(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    optimistic: Optional[float] = typer.Option(None, "--optimistic", "-o", min=0.0),
    most_likely: Optional[float] = typer.Option(None, "--most-likely", "-m", min=0.0),
    pessimistic: Optional[float] = typer.Option(None, "--pessimistic", "-p", min=0.0),
    file: FileOption = None,
) -> None:
    """Set one or more of a task's O/M/P estimates (hours, >= 0)."""
    values = {
        EstimateKind.OPTIMISTIC: optimistic,
        EstimateKind.MOST_LIKELY: most_likely,
        EstimateKind.PESSIMISTIC: pessimistic,
    }
    commands: list[Command] = [
        UpdateEstimate(milestone_id=milestone_id, task_id=task_id, which=which, value=value)
        for which, value in values.items()
        if value is not None
    ]
    if not commands:
        print_error("Nothing to update. Pass at least one of -o, -m, -p.")
        raise typer.Exit(1)

    if _apply_many(file, commands):
        print_success(f"Updated estimates for {task_id}")
    else:
        print_warning(f"Task {task_id} in milestone {milestone_id} not found; nothing changed.")


def _set_enabled(milestone_id: str, task_id: str, enabled: bool, file: FileOption) -> None:
    before, after = apply_and_save(
        file,
        UpdateTask(milestone_id=milestone_id, task_id=task_id, field="isEnabled", value=enabled),
    )
    if not warn_if_unchanged(before, after, f"Task {task_id}"):
        print_success(f"Task {task_id} {'enabled' if enabled else 'disabled'}")


@app.command("enable")
def enable(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    file: FileOption = None,
) -> None:
    """Include a task in totals and exports."""
    _set_enabled(milestone_id, task_id, True, file)


@app.command("disable")
def disable(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    file: FileOption = None,
) -> None:
    """Exclude a task from totals and exports."""
    _set_enabled(milestone_id, task_id, False, file)


@app.command("delete")
def delete(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    file: FileOption = None,
) -> None:
    """Delete a task; the milestone's remaining tasks are renumbered."""
    before, after = apply_and_save(file, DeleteTask(milestone_id=milestone_id, task_id=task_id))
    if not warn_if_unchanged(before, after, f"Task {task_id}"):
        print_success(f"Deleted task {task_id}")


@app.command("move")
def move(
    task_id: str = typer.Argument(..., help="Task id, e.g. A2"),
    source: str = typer.Argument(..., help="Source milestone letter"),
    dest: str = typer.Argument(..., help="Destination milestone letter"),
    file: FileOption = None,
) -> None:
    """Move a task to the end of another milestone."""
    before, after = apply_and_save(
        file,
        MoveTask(source_milestone_id=source, dest_milestone_id=dest, task_id=task_id),
    )
    if warn_if_unchanged(before, after, f"Task {task_id} in {source} (or milestone {dest})"):
        return

    new_id = next(m for m in after.milestones if m.id == dest).tasks[-1].id
    print_success(f"Moved {task_id} to milestone {dest} as {new_id}")


@app.command("show")
def show(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    file: FileOption = None,
) -> None:
    """Show a task with expected time and confidence bands."""
    _, project = load_project(file)
    task = find_task(project, milestone_id, task_id)
    if task is None:
        print_error(f"Task {task_id} not found in milestone {milestone_id}")
        raise typer.Exit(1)

    typer.echo(format_task_output(task))
    if is_management_task(task):
        print_warning("Names starting with 'Project Management' are excluded from the overhead base.")
