"""Positional identifiers for milestones and tasks.

Milestone ids are letters assigned by position (A, B, ..., Z, then AA, AB,
... like spreadsheet columns). Task ids are the milestone id followed by the
1-based task position. Since milestone ids are letters only and the task
suffix is digits only, no two tasks in a project can share an id.

All functions are pure.
"""

from collections.abc import Sequence

from .models import Milestone, Task


def milestone_id_at(index: int) -> str:
    """Return the milestone id for a 0-based position.

    Example:
        milestone_id_at(0)   # "A"
        milestone_id_at(25)  # "Z"
        milestone_id_at(26)  # "AA"

    Raises:
        ValueError: If index is negative.
    """
    if index < 0:
        raise ValueError(f"Milestone index must be non-negative, got {index}")

    letters = ""
    n = index
    while True:
        n, remainder = divmod(n, 26)
        letters = chr(ord("A") + remainder) + letters
        if n == 0:
            return letters
        n -= 1


def task_id_at(milestone_id: str, index: int) -> str:
    """Return the task id for a 0-based position within a milestone."""
    return f"{milestone_id}{index + 1}"


def renumber_tasks(milestone_id: str, tasks: Sequence[Task]) -> list[Task]:
    """Reassign task ids to match their positions under milestone_id."""
    return [
        task.model_copy(update={"id": task_id_at(milestone_id, i)})
        for i, task in enumerate(tasks)
    ]


def renumber_milestone(milestone: Milestone) -> Milestone:
    """Reassign the ids of a milestone's tasks to match its current id."""
    return milestone.model_copy(
        update={"tasks": renumber_tasks(milestone.id, milestone.tasks)}
    )


def renumber_milestones(milestones: Sequence[Milestone]) -> list[Milestone]:
    """Reassign milestone ids by position, and every task id beneath them."""
    return [
        renumber_milestone(milestone.model_copy(update={"id": milestone_id_at(i)}))
        for i, milestone in enumerate(milestones)
    ]
