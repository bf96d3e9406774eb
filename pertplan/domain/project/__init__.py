"""Project domain - the estimation hierarchy and its state transitions.

Key Types:
    Project - Root aggregate
    Milestone - Lettered group of tasks
    Task - Three-point estimated unit of work
    Estimates - Optimistic / most likely / pessimistic hours
    QAndAEntry - Positional question/answer pair
    Command - Tagged union of every store command

Store:
    apply_command - Pure transition (project, command) -> project
    find_milestone / find_task - Lookups by id

Identifiers:
    milestone_id_at / task_id_at - Positional id allocation
"""

from .commands import (
    AddMilestone,
    AddQAndA,
    AddTask,
    Command,
    DeleteMilestone,
    DeleteQAndA,
    DeleteTask,
    EstimateKind,
    LoadProject,
    MoveTask,
    SetProjectField,
    UpdateEstimate,
    UpdateMilestone,
    UpdateQAndA,
    UpdateRemarks,
    UpdateTask,
    parse_command,
)
from .identifiers import (
    milestone_id_at,
    renumber_milestones,
    renumber_tasks,
    task_id_at,
)
from .models import (
    DEFAULT_PROJECT_NAME,
    DEFAULT_REMARKS,
    DEFAULT_TASK_NAME,
    Estimates,
    InvalidSnapshotError,
    Milestone,
    Project,
    QAndAEntry,
    Task,
    initial_project,
)
from .store import apply_command, find_milestone, find_task

__all__ = [
    # Models
    "Project",
    "Milestone",
    "Task",
    "Estimates",
    "QAndAEntry",
    "InvalidSnapshotError",
    "initial_project",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_TASK_NAME",
    "DEFAULT_REMARKS",
    # Identifiers
    "milestone_id_at",
    "task_id_at",
    "renumber_tasks",
    "renumber_milestones",
    # Commands
    "Command",
    "EstimateKind",
    "SetProjectField",
    "LoadProject",
    "UpdateRemarks",
    "AddMilestone",
    "UpdateMilestone",
    "DeleteMilestone",
    "AddTask",
    "UpdateTask",
    "UpdateEstimate",
    "DeleteTask",
    "MoveTask",
    "AddQAndA",
    "UpdateQAndA",
    "DeleteQAndA",
    "parse_command",
    # Store
    "apply_command",
    "find_milestone",
    "find_task",
]
