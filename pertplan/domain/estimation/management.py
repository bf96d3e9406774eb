"""Project management overhead task.

Every milestone gets a synthesized overhead task sized at 10% / 15% / 20%
of the rounded-up expected hours of its other enabled tasks. The task is
derived on every read and is never stored in the project.
"""

import math

from pertplan.domain.project.models import Estimates, Milestone, Task

from .pert import task_expected

MANAGEMENT_PREFIX = "Project Management"
MANAGEMENT_TASK_NAME = "Project Management (10%, 15%, 20%)"
MANAGEMENT_TASK_DESCRIPTION = (
    "Auto-estimated based on the sum of other tasks. Includes project management, "
    "meetings, communication, and delivery orchestration."
)
MANAGEMENT_ID_SUFFIX = "-mgmt"

OPTIMISTIC_SHARE = 0.10
MOST_LIKELY_SHARE = 0.15
PESSIMISTIC_SHARE = 0.20


def is_management_task(task: Task) -> bool:
    """Check if a task uses the reserved management name prefix."""
    return task.name.startswith(MANAGEMENT_PREFIX)


def management_base_hours(milestone: Milestone) -> int:
    """Rounded-up expected hours of enabled, non-management tasks."""
    base = sum(
        task_expected(task)
        for task in milestone.tasks
        if task.is_enabled and not is_management_task(task)
    )
    return math.ceil(base)


def management_task(milestone: Milestone) -> Task:
    """Synthesize the overhead task for a milestone.

    The task is always enabled; a disabled milestone is excluded from
    totals by the milestone flag instead.
    """
    base = management_base_hours(milestone)
    return Task(
        id=f"{milestone.id}{MANAGEMENT_ID_SUFFIX}",
        name=MANAGEMENT_TASK_NAME,
        description=MANAGEMENT_TASK_DESCRIPTION,
        estimates=Estimates(
            optimistic=base * OPTIMISTIC_SHARE,
            most_likely=base * MOST_LIKELY_SHARE,
            pessimistic=base * PESSIMISTIC_SHARE,
        ),
        is_enabled=True,
    )


def tasks_with_management(milestone: Milestone) -> list[Task]:
    """The milestone's own tasks followed by its management task."""
    return [*milestone.tasks, management_task(milestone)]
