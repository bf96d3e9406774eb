"""Shared utilities for pertplan CLI commands.

This module provides common utilities used across CLI commands:
- Snapshot file resolution, loading and saving
- Load / apply command / save in one step
- Formatted output helpers (error, success, info)
- Logging setup
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from pertplan.config import FILE_ENV_VAR, debug_enabled, resolve_snapshot_path
from pertplan.domain.project import Command, Project, apply_command, initial_project
from pertplan.domain.shared import Err
from pertplan.infrastructure.storage import SnapshotRepository

logger = logging.getLogger(__name__)

# Reusable snapshot file option for CLI commands
# Usage: def my_command(file: FileOption = None) -> None:
FileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--file",
        "-f",
        help=f"Snapshot file (or set {FILE_ENV_VAR} env var)",
        envvar=FILE_ENV_VAR,
    ),
]


# =============================================================================
# Logging
# =============================================================================


def setup_logging(verbose: bool = False) -> None:
    """Configure the pertplan logger once per CLI run.

    WARNING by default; DEBUG with --verbose or PERTPLAN_DEBUG set.
    """
    debug = verbose or debug_enabled()
    level = logging.DEBUG if debug else logging.WARNING

    root = logging.getLogger("pertplan")
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if debug:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)


# =============================================================================
# Snapshot handling
# =============================================================================


def load_project(file: Optional[Path]) -> tuple[Path, Project]:
    """Resolve the snapshot path and load it.

    A missing file yields the initial project so that the first edit
    creates it.

    Raises:
        typer.Exit: If the file exists but cannot be loaded.
    """
    path = resolve_snapshot_path(file)
    repo = SnapshotRepository()

    if not repo.exists(path):
        logger.debug(f"{path} not found, starting from the initial project")
        return path, initial_project()

    result = repo.load(path)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return path, result.value


def save_project(path: Path, project: Project) -> None:
    """Write the snapshot.

    Raises:
        typer.Exit: If the file cannot be written.
    """
    result = SnapshotRepository().save(path, project)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)


def apply_and_save(file: Optional[Path], command: Command) -> tuple[Project, Project]:
    """Load the snapshot, apply one command and save the result.

    Returns:
        (before, after) project values. They are the same object when the
        command referred to something that does not exist.
    """
    path, before = load_project(file)
    after = apply_command(before, command)
    if after is before:
        logger.debug(f"{type(command).__name__} changed nothing")
    save_project(path, after)
    return before, after


def warn_if_unchanged(before: Project, after: Project, what: str) -> bool:
    """Print a warning when a command was a no-op. Returns True if so."""
    if after is before:
        print_warning(f"{what} not found; nothing changed.")
        return True
    return False


# =============================================================================
# Output
# =============================================================================


def print_error(msg: str) -> None:
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


__all__ = [
    "FileOption",
    "setup_logging",
    "load_project",
    "save_project",
    "apply_and_save",
    "warn_if_unchanged",
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
]
