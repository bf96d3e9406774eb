"""Milestone and project totals.

Totals include the synthesized management task and honor both levels of
the enabled flag: a disabled milestone contributes 0 regardless of its
tasks, and inside an enabled milestone only enabled tasks count.

All functions are pure - no I/O, no side effects.
"""

from pydantic import BaseModel, Field

from pertplan.domain.project.models import Milestone, Project, Task

from .management import tasks_with_management
from .pert import task_expected


class TaskExpectation(BaseModel):
    """A task together with its expected hours."""

    task: Task
    expected: float


class MilestoneSummary(BaseModel):
    """Roll-up figures for one milestone."""

    id: str
    name: str
    is_enabled: bool
    task_count: int
    enabled_task_count: int
    total: float


class ProjectSummary(BaseModel):
    """Roll-up figures for the whole project.

    A lightweight view for listing totals without the task details.
    """

    client_name: str
    project_name: str
    milestones: list[MilestoneSummary] = Field(default_factory=list)
    grand_total: float = 0.0


def milestone_breakdown(milestone: Milestone) -> list[TaskExpectation]:
    """List the tasks counted in a milestone's total, with their hours.

    Empty for a disabled milestone. Otherwise every enabled task followed
    by the management task.
    """
    if not milestone.is_enabled:
        return []
    return [
        TaskExpectation(task=task, expected=task_expected(task))
        for task in tasks_with_management(milestone)
        if task.is_enabled
    ]


def milestone_total(milestone: Milestone) -> float:
    """Expected hours for a milestone, management overhead included."""
    return sum((item.expected for item in milestone_breakdown(milestone)), 0.0)


def project_total(project: Project) -> float:
    """Expected hours for the whole project."""
    return sum((milestone_total(m) for m in project.milestones), 0.0)


def project_summary(project: Project) -> ProjectSummary:
    """Create a summary of per-milestone and grand totals."""
    milestones = [
        MilestoneSummary(
            id=m.id,
            name=m.name,
            is_enabled=m.is_enabled,
            task_count=len(m.tasks),
            enabled_task_count=sum(1 for t in m.tasks if t.is_enabled),
            total=milestone_total(m),
        )
        for m in project.milestones
    ]
    return ProjectSummary(
        client_name=project.client_name,
        project_name=project.project_name,
        milestones=milestones,
        grand_total=sum((m.total for m in milestones), 0.0),
    )
