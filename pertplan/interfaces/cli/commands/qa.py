"""Q&A CLI commands.

Entries are addressed by their 0-based position in the task's list, as
shown by ``pertplan task show``. Deleting an entry shifts the ones after it.
"""

from typing import Optional

import typer

from pertplan.domain.project import (
    AddQAndA,
    DeleteQAndA,
    UpdateQAndA,
    apply_command,
    find_task,
)
from pertplan.interfaces.cli.common import (
    FileOption,
    apply_and_save,
    load_project,
    print_error,
    print_success,
    save_project,
    warn_if_unchanged,
)

app = typer.Typer(help="Questions and answers attached to a task")


@app.command("add")
def add(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    question: Optional[str] = typer.Option(None, "--question", "-q"),
    answer: Optional[str] = typer.Option(None, "--answer", "-a"),
    file: FileOption = None,
) -> None:
    """Append a Q&A entry, optionally filling it in."""
    path, before = load_project(file)
    after = apply_command(before, AddQAndA(milestone_id=milestone_id, task_id=task_id))
    if warn_if_unchanged(before, after, f"Task {task_id}"):
        return

    index = len(find_task(after, milestone_id, task_id).q_and_a) - 1
    for field, value in (("question", question), ("answer", answer)):
        if value is not None:
            after = apply_command(
                after,
                UpdateQAndA(
                    milestone_id=milestone_id,
                    task_id=task_id,
                    index=index,
                    field=field,
                    value=value,
                ),
            )
    save_project(path, after)
    print_success(f"Added Q&A entry {index} to {task_id}")


@app.command("update")
def update(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    index: int = typer.Argument(..., help="Entry position (0-based)"),
    question: Optional[str] = typer.Option(None, "--question", "-q"),
    answer: Optional[str] = typer.Option(None, "--answer", "-a"),
    file: FileOption = None,
) -> None:
    """Edit the question and/or answer of an entry."""
    if question is None and answer is None:
        print_error("Nothing to update. Pass --question and/or --answer.")
        raise typer.Exit(1)

    path, before = load_project(file)
    after = before
    for field, value in (("question", question), ("answer", answer)):
        if value is not None:
            after = apply_command(
                after,
                UpdateQAndA(
                    milestone_id=milestone_id,
                    task_id=task_id,
                    index=index,
                    field=field,
                    value=value,
                ),
            )

    if after is before:
        print_error(f"Q&A entry {index} of task {task_id} not found")
        raise typer.Exit(1)

    save_project(path, after)
    print_success(f"Updated Q&A entry {index} of {task_id}")


@app.command("delete")
def delete(
    milestone_id: str = typer.Argument(..., help="Milestone letter"),
    task_id: str = typer.Argument(..., help="Task id"),
    index: int = typer.Argument(..., help="Entry position (0-based)"),
    file: FileOption = None,
) -> None:
    """Delete an entry; later entries move up by one."""
    before, after = apply_and_save(
        file, DeleteQAndA(milestone_id=milestone_id, task_id=task_id, index=index)
    )
    if not warn_if_unchanged(before, after, f"Q&A entry {index} of {task_id}"):
        print_success(f"Deleted Q&A entry {index} of {task_id}")
