"""Project-level CLI commands.

Create a snapshot, edit client/project names and remarks, show the
estimation tree with totals, and import an existing snapshot.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pertplan.config import resolve_snapshot_path
from pertplan.domain.estimation import (
    format_hours,
    milestone_total,
    project_total,
    task_expected,
    tasks_with_management,
)
from pertplan.domain.project import (
    Project,
    SetProjectField,
    UpdateRemarks,
    apply_command,
    initial_project,
)
from pertplan.domain.shared import Err
from pertplan.infrastructure.storage import SnapshotRepository
from pertplan.interfaces.cli.common import (
    FileOption,
    apply_and_save,
    load_project,
    print_error,
    print_info,
    print_success,
    save_project,
)

app = typer.Typer(help="Project setup, overview and import")

console = Console(highlight=False)


# =============================================================================
# Output Formatting Helpers
# =============================================================================


def render_project(project: Project) -> None:
    """Print every milestone as a table, followed by the grand total."""
    title = project.project_name
    if project.client_name:
        title = f"{project.client_name} - {title}"
    console.print(f"[bold]{escape(title)}[/bold]")

    for milestone in project.milestones:
        state = "" if milestone.is_enabled else " (disabled)"
        table = Table(title=f"{escape(milestone.id)}  {escape(milestone.name)}{state}")
        table.add_column("ID")
        table.add_column("Task")
        table.add_column("O", justify="right")
        table.add_column("M", justify="right")
        table.add_column("P", justify="right")
        table.add_column("E (h)", justify="right")
        table.add_column("On")

        for task in tasks_with_management(milestone):
            table.add_row(
                escape(task.id),
                escape(task.name),
                format_hours(task.estimates.optimistic),
                format_hours(task.estimates.most_likely),
                format_hours(task.estimates.pessimistic),
                format_hours(task_expected(task)),
                "yes" if task.is_enabled else "no",
            )

        console.print(table)
        console.print(f"Milestone Total (E): {format_hours(milestone_total(milestone))}h")

    console.print(f"[bold]Project Grand Total: {format_hours(project_total(project))}h[/bold]")


# =============================================================================
# Commands
# =============================================================================


@app.command("init")
def init(
    client: str = typer.Option("", "--client", "-c", help="Client name"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing snapshot"),
    file: FileOption = None,
) -> None:
    """Create a new estimation snapshot with one empty milestone."""
    path = resolve_snapshot_path(file)
    if path.exists() and not force:
        print_error(f"{path} already exists. Use --force to overwrite.")
        raise typer.Exit(1)

    project = initial_project()
    project = apply_command(project, SetProjectField(field="clientName", value=client))
    if name is not None:
        project = apply_command(project, SetProjectField(field="projectName", value=name))

    save_project(path, project)
    print_success(f"Created {path}")


@app.command("info")
def info(
    client: Optional[str] = typer.Option(None, "--client", "-c", help="Client name"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name"),
    file: FileOption = None,
) -> None:
    """Set the client and/or project name."""
    if client is None and name is None:
        _, project = load_project(file)
        typer.echo(f"Client:  {project.client_name}")
        typer.echo(f"Project: {project.project_name}")
        return

    if client is not None:
        apply_and_save(file, SetProjectField(field="clientName", value=client))
    if name is not None:
        apply_and_save(file, SetProjectField(field="projectName", value=name))
    print_success("Project info updated")


@app.command("remarks")
def remarks(
    text: Optional[str] = typer.Argument(None, help="New remarks (Markdown); omit to print"),
    file: FileOption = None,
) -> None:
    """Show or replace the internal remarks (never exported)."""
    if text is None:
        _, project = load_project(file)
        typer.echo(project.remarks)
        return

    apply_and_save(file, UpdateRemarks(value=text))
    print_success("Remarks updated")


@app.command("show")
def show(file: FileOption = None) -> None:
    """Show milestones, tasks and expected hours."""
    _, project = load_project(file)
    render_project(project)


@app.command("import")
def import_snapshot(
    source: Path = typer.Argument(..., help="Snapshot JSON to import"),
    file: FileOption = None,
) -> None:
    """Replace the current project with an imported snapshot.

    The target file is overwritten without being read, so a damaged
    snapshot can be replaced this way.
    """
    result = SnapshotRepository().load(source)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    imported = result.value
    save_project(resolve_snapshot_path(file), imported)
    print_success(f"Imported '{imported.project_name}' from {source}")
    print_info(f"{len(imported.milestones)} milestone(s)")
