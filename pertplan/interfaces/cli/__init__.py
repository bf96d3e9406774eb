"""CLI interface for pertplan using Typer.

Usage:
    pertplan init --client Acme --name "Website"   # Create a snapshot
    pertplan task add A --name "Design"            # Add a task to milestone A
    pertplan task estimate A A1 -o 4 -m 6 -p 12    # Three-point estimate
    pertplan show                                  # Tree with totals
    pertplan export csv                            # Redmine import file

Every command reads the snapshot file (-f, PERTPLAN_FILE or the configured
default), applies one edit and writes it back. Command groups live in
commands/; loading, saving and output helpers in common.py.
"""

from pathlib import Path
from typing import Optional

import typer

from pertplan import __version__
from pertplan.config import get_config_dir, get_settings, save_settings
from pertplan.interfaces.cli.commands import export, milestone, project, qa, task
from pertplan.interfaces.cli.common import FileOption, print_success, setup_logging

app = typer.Typer(
    name="pertplan",
    help="PERT project estimation: milestones, tasks and three-point estimates",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pertplan version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """pertplan - PERT estimation for milestone/task project plans.

    Expected time per task is (O + 4M + P) / 6; every milestone adds a
    10/15/20% project management overhead task.
    """
    setup_logging(verbose)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(project.app, name="project")
app.add_typer(milestone.app, name="milestone")
app.add_typer(task.app, name="task")
app.add_typer(qa.app, name="qa")
app.add_typer(export.app, name="export")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("init")
def init(
    client: str = typer.Option("", "--client", "-c", help="Client name"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing snapshot"),
    file: FileOption = None,
) -> None:
    """Create a snapshot (shortcut for 'project init')."""
    project.init(client=client, name=name, force=force, file=file)


@app.command("show")
def show(file: FileOption = None) -> None:
    """Show the estimation tree (shortcut for 'project show')."""
    project.show(file=file)


@app.command("import")
def import_snapshot(
    source: Path = typer.Argument(..., help="Snapshot JSON to import"),
    file: FileOption = None,
) -> None:
    """Import a snapshot (shortcut for 'project import')."""
    project.import_snapshot(source=source, file=file)


@app.command("config")
def config(
    snapshot_path: Optional[str] = typer.Option(
        None, "--snapshot-path", help="Snapshot file used when -f and PERTPLAN_FILE are unset"
    ),
) -> None:
    """Show or change user settings."""
    settings = get_settings()
    if snapshot_path is None:
        typer.echo(f"Config dir:    {get_config_dir()}")
        typer.echo(f"Snapshot path: {settings.snapshot_path}")
        return

    save_settings(settings.model_copy(update={"snapshot_path": snapshot_path}))
    print_success(f"Default snapshot file set to {snapshot_path}")


__all__ = ["app"]
