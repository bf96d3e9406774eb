"""Export formatters.

Three projections of the current project:

- JSON snapshot: the full project, remarks included. This is the
  persistence format, so ``load_json(export_json(p)) == p``.
- CSV: one row per enabled task of an enabled milestone, ready for a
  Redmine issue import. Only the milestone's own tasks are listed; the
  synthesized management task is not.
- Report view model: enabled milestones with their enabled tasks plus the
  management task, subtotals and the grand total. Rendering it (PDF or
  otherwise) is up to the caller.

All functions are pure - no I/O, no side effects.
"""

import json

from pydantic import BaseModel, Field

from pertplan.domain.estimation import (
    FORMULA,
    format_hours,
    milestone_total,
    project_total,
    task_expected,
    task_std_dev,
    tasks_with_management,
)
from pertplan.domain.project import Project, Task

CSV_HEADER = "Subject,Description,Target version,Estimated time"

REPORT_INTRO = (
    "The Program Evaluation and Review Technique (PERT) is a statistical tool used in "
    "project management to analyze and represent the tasks involved in completing a "
    "given project. This report provides an estimate based on three time values for "
    "each task: Optimistic (O), the minimum possible time assuming everything proceeds "
    "better than normally expected; Most Likely (M), the best estimate assuming "
    "everything proceeds as normal; and Pessimistic (P), the maximum possible time "
    "assuming everything goes wrong (excluding major catastrophes). The Expected Time "
    "(E) is the weighted average of these values, and confidence intervals based on "
    "the standard deviation indicate the range of likely outcomes."
)

DEFAULT_JSON_FILENAME = "pert-estimation.json"


# =============================================================================
# JSON snapshot
# =============================================================================


def export_json(project: Project, indent: int = 2) -> str:
    """Serialize the full project, remarks included."""
    return json.dumps(project.to_snapshot(), indent=indent, ensure_ascii=False)


def load_json(text: str) -> Project:
    """Parse snapshot text back into a Project.

    Raises:
        InvalidSnapshotError: If the text is not a usable snapshot.
        json.JSONDecodeError: If the text is not JSON at all.
    """
    return Project.from_snapshot(json.loads(text))


# =============================================================================
# CSV
# =============================================================================


def _quote(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def csv_description(task: Task) -> str:
    """Description, tests and definition of done joined by blank lines."""
    parts = [
        task.description,
        f"Tests:\n{task.tests}" if task.tests else "",
        f"Definition of Done:\n{task.definition_of_done}" if task.definition_of_done else "",
    ]
    return "\n\n".join(part for part in parts if part)


def export_csv(project: Project) -> str:
    """Render the Redmine import CSV.

    Text fields are double-quoted with embedded quotes doubled; the
    estimated time is left unquoted.
    """
    lines = [CSV_HEADER]
    for milestone in project.milestones:
        if not milestone.is_enabled:
            continue
        for task in milestone.tasks:
            if not task.is_enabled:
                continue
            row = [
                _quote(task.name),
                _quote(csv_description(task)),
                _quote(milestone.name),
                format_hours(task_expected(task)),
            ]
            lines.append(",".join(row))
    return "\n".join(lines) + "\n"


def csv_filename(project: Project) -> str:
    return f"{project.project_name}_Redmine_Import.csv"


# =============================================================================
# Report view model
# =============================================================================


class ReportTask(BaseModel):
    """One task line in the report."""

    id: str
    name: str
    description: str = ""
    tests: str = ""
    definition_of_done: str = ""
    expected: float
    std_dev: float
    expected_display: str


class ReportMilestone(BaseModel):
    """An enabled milestone with the tasks that make up its total."""

    id: str
    name: str
    tasks: list[ReportTask] = Field(default_factory=list)
    total: float
    total_display: str


class ProjectReport(BaseModel):
    """Everything an external renderer needs to draw the estimation report.

    Data only, no layout. Remarks are never included.
    """

    title: str
    client_name: str
    project_name: str
    intro: str = REPORT_INTRO
    formula: str = FORMULA
    milestones: list[ReportMilestone] = Field(default_factory=list)
    grand_total: float
    grand_total_display: str


def _report_task(task: Task) -> ReportTask:
    expected_hours = task_expected(task)
    return ReportTask(
        id=task.id,
        name=task.name,
        description=task.description,
        tests=task.tests,
        definition_of_done=task.definition_of_done,
        expected=expected_hours,
        std_dev=task_std_dev(task),
        expected_display=format_hours(expected_hours),
    )


def build_report(project: Project) -> ProjectReport:
    """Build the report view model for the current project."""
    milestones = []
    for milestone in project.milestones:
        if not milestone.is_enabled:
            continue
        total = milestone_total(milestone)
        milestones.append(
            ReportMilestone(
                id=milestone.id,
                name=milestone.name,
                tasks=[_report_task(t) for t in tasks_with_management(milestone) if t.is_enabled],
                total=total,
                total_display=format_hours(total),
            )
        )

    grand_total = project_total(project)
    return ProjectReport(
        title=report_title(project),
        client_name=project.client_name,
        project_name=project.project_name,
        milestones=milestones,
        grand_total=grand_total,
        grand_total_display=format_hours(grand_total),
    )


def report_title(project: Project) -> str:
    return f"{project.client_name} - {project.project_name}"


def report_filename(project: Project) -> str:
    """File name for the rendered report, e.g. ``Acme_-_Site_PERT_Estimation.pdf``."""
    return f"{report_title(project).replace(' ', '_')}_PERT_Estimation.pdf"
