"""Estimation domain - PERT arithmetic and roll-ups.

PERT Functions:
    expected - (O + 4M + P) / 6
    std_dev - (P - O) / 6
    confidence_band / confidence_bands - expected ± k·σ
    format_hours - Two-decimal display, total over any input

Management Overhead:
    management_task - Synthesized 10/15/20% task per milestone
    tasks_with_management - Real tasks followed by the synthesized one

Aggregation:
    milestone_total / project_total - Enabled-aware totals
    project_summary - Per-milestone figures for display
"""

from .aggregation import (
    MilestoneSummary,
    ProjectSummary,
    TaskExpectation,
    milestone_breakdown,
    milestone_total,
    project_summary,
    project_total,
)
from .management import (
    MANAGEMENT_PREFIX,
    MANAGEMENT_TASK_DESCRIPTION,
    MANAGEMENT_TASK_NAME,
    is_management_task,
    management_base_hours,
    management_task,
    tasks_with_management,
)
from .pert import (
    CONFIDENCE_LEVELS,
    FORMULA,
    ConfidenceBand,
    confidence_band,
    confidence_bands,
    estimates_expected,
    expected,
    format_hours,
    std_dev,
    task_expected,
    task_std_dev,
)

__all__ = [
    # PERT
    "FORMULA",
    "CONFIDENCE_LEVELS",
    "ConfidenceBand",
    "expected",
    "std_dev",
    "confidence_band",
    "confidence_bands",
    "estimates_expected",
    "task_expected",
    "task_std_dev",
    "format_hours",
    # Management
    "MANAGEMENT_PREFIX",
    "MANAGEMENT_TASK_NAME",
    "MANAGEMENT_TASK_DESCRIPTION",
    "is_management_task",
    "management_base_hours",
    "management_task",
    "tasks_with_management",
    # Aggregation
    "TaskExpectation",
    "MilestoneSummary",
    "ProjectSummary",
    "milestone_breakdown",
    "milestone_total",
    "project_total",
    "project_summary",
]
