"""Project store: the state transition function.

``apply_command(project, command)`` returns the next Project value. It never
mutates its input and never raises for a command that refers to something
that does not exist: unknown milestone or task ids, out-of-range Q&A
indices, unsupported field names and values of the wrong type for the
target field all return the project unchanged.

Every structural change (delete, move) renumbers the affected ids so that
milestones read A, B, C, ... and tasks read {milestone}1..{milestone}N in
list order.

All functions are pure - no I/O, no side effects.
"""

from collections.abc import Callable
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

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
)
from .identifiers import milestone_id_at, renumber_milestones, renumber_tasks, task_id_at
from .models import Estimates, Milestone, Project, QAndAEntry, Task

# Accepted field names (wire and Python spellings) -> model attribute
PROJECT_FIELDS = {
    "clientName": "client_name",
    "client_name": "client_name",
    "projectName": "project_name",
    "project_name": "project_name",
}

MILESTONE_FIELDS = {
    "name": "name",
    "isEnabled": "is_enabled",
    "is_enabled": "is_enabled",
}

TASK_FIELDS = {
    "name": "name",
    "description": "description",
    "tests": "tests",
    "definitionOfDone": "definition_of_done",
    "definition_of_done": "definition_of_done",
    "isEnabled": "is_enabled",
    "is_enabled": "is_enabled",
}

ESTIMATE_PATHS = {
    "estimates.optimistic": EstimateKind.OPTIMISTIC,
    "estimates.mostLikely": EstimateKind.MOST_LIKELY,
    "estimates.most_likely": EstimateKind.MOST_LIKELY,
    "estimates.pessimistic": EstimateKind.PESSIMISTIC,
}

QANDA_FIELDS = ("question", "answer")


# =============================================================================
# Lookup and update helpers
# =============================================================================


def find_milestone(project: Project, milestone_id: str) -> Milestone | None:
    """Return the first milestone with the given id, or None."""
    return next((m for m in project.milestones if m.id == milestone_id), None)


def find_task(project: Project, milestone_id: str, task_id: str) -> Task | None:
    """Return the task with task_id inside milestone_id, or None."""
    milestone = find_milestone(project, milestone_id)
    if milestone is None:
        return None
    return next((t for t in milestone.tasks if t.id == task_id), None)


def _map_milestone(
    project: Project,
    milestone_id: str,
    f: Callable[[Milestone], Milestone],
) -> Project:
    if find_milestone(project, milestone_id) is None:
        return project
    return project.model_copy(
        update={
            "milestones": [
                f(m) if m.id == milestone_id else m for m in project.milestones
            ]
        }
    )


def _map_task(
    project: Project,
    milestone_id: str,
    task_id: str,
    f: Callable[[Task], Task],
) -> Project:
    if find_task(project, milestone_id, task_id) is None:
        return project

    def update_tasks(milestone: Milestone) -> Milestone:
        return milestone.model_copy(
            update={"tasks": [f(t) if t.id == task_id else t for t in milestone.tasks]}
        )

    return _map_milestone(project, milestone_id, update_tasks)


@lru_cache(maxsize=None)
def _field_adapter(model: type[BaseModel], attribute: str) -> TypeAdapter:
    return TypeAdapter(model.model_fields[attribute].annotation)


def _field_value(model: type[BaseModel], attribute: str, value: Any) -> Any:
    """Check value against the declared type of model.attribute.

    Strict: "6" is not a float and "false" is not a bool. Ints are
    accepted for float fields.

    Raises:
        ValidationError: If the value does not fit the field.
    """
    return _field_adapter(model, attribute).validate_python(value, strict=True)


def _set_estimate(task: Task, which: EstimateKind, value: float) -> Task:
    estimates = task.estimates.model_copy(update={which.attribute: value})
    return task.model_copy(update={"estimates": estimates})


# =============================================================================
# Command handlers
# =============================================================================


def _set_project_field(project: Project, command: SetProjectField) -> Project:
    attribute = PROJECT_FIELDS.get(command.field)
    if attribute is None:
        return project
    return project.model_copy(update={attribute: command.value})


def _load_project(project: Project, command: LoadProject) -> Project:
    return command.project


def _update_remarks(project: Project, command: UpdateRemarks) -> Project:
    return project.model_copy(update={"remarks": command.value})


def _add_milestone(project: Project, command: AddMilestone) -> Project:
    new_id = milestone_id_at(len(project.milestones))
    milestone = Milestone(id=new_id, name=f"Milestone {new_id}", is_enabled=True, tasks=[])
    return project.model_copy(update={"milestones": [*project.milestones, milestone]})


def _update_milestone(project: Project, command: UpdateMilestone) -> Project:
    attribute = MILESTONE_FIELDS.get(command.field)
    if attribute is None:
        return project
    try:
        value = _field_value(Milestone, attribute, command.value)
    except ValidationError:
        return project
    return _map_milestone(
        project,
        command.milestone_id,
        lambda m: m.model_copy(update={attribute: value}),
    )


def _delete_milestone(project: Project, command: DeleteMilestone) -> Project:
    if find_milestone(project, command.milestone_id) is None:
        return project
    remaining = [m for m in project.milestones if m.id != command.milestone_id]
    return project.model_copy(update={"milestones": renumber_milestones(remaining)})


def _add_task(project: Project, command: AddTask) -> Project:
    def append_task(milestone: Milestone) -> Milestone:
        task = Task(id=task_id_at(milestone.id, len(milestone.tasks)))
        return milestone.model_copy(update={"tasks": [*milestone.tasks, task]})

    return _map_milestone(project, command.milestone_id, append_task)


def _update_task(project: Project, command: UpdateTask) -> Project:
    which = ESTIMATE_PATHS.get(command.field)
    if which is not None:
        try:
            estimate = _field_value(Estimates, which.attribute, command.value)
        except ValidationError:
            return project
        return _map_task(
            project,
            command.milestone_id,
            command.task_id,
            lambda t: _set_estimate(t, which, estimate),
        )

    attribute = TASK_FIELDS.get(command.field)
    if attribute is None:
        return project
    try:
        value = _field_value(Task, attribute, command.value)
    except ValidationError:
        return project
    return _map_task(
        project,
        command.milestone_id,
        command.task_id,
        lambda t: t.model_copy(update={attribute: value}),
    )


def _update_estimate(project: Project, command: UpdateEstimate) -> Project:
    return _map_task(
        project,
        command.milestone_id,
        command.task_id,
        lambda t: _set_estimate(t, command.which, command.value),
    )


def _delete_task(project: Project, command: DeleteTask) -> Project:
    if find_task(project, command.milestone_id, command.task_id) is None:
        return project

    def remove_task(milestone: Milestone) -> Milestone:
        remaining = [t for t in milestone.tasks if t.id != command.task_id]
        return milestone.model_copy(update={"tasks": renumber_tasks(milestone.id, remaining)})

    return _map_milestone(project, command.milestone_id, remove_task)


def _move_task(project: Project, command: MoveTask) -> Project:
    if command.source_milestone_id == command.dest_milestone_id:
        return project

    task = find_task(project, command.source_milestone_id, command.task_id)
    if task is None or find_milestone(project, command.dest_milestone_id) is None:
        return project

    def remove_task(milestone: Milestone) -> Milestone:
        remaining = [t for t in milestone.tasks if t.id != command.task_id]
        return milestone.model_copy(update={"tasks": renumber_tasks(milestone.id, remaining)})

    def append_task(milestone: Milestone) -> Milestone:
        tasks = [*milestone.tasks, task]
        return milestone.model_copy(update={"tasks": renumber_tasks(milestone.id, tasks)})

    project = _map_milestone(project, command.source_milestone_id, remove_task)
    return _map_milestone(project, command.dest_milestone_id, append_task)


def _add_q_and_a(project: Project, command: AddQAndA) -> Project:
    return _map_task(
        project,
        command.milestone_id,
        command.task_id,
        lambda t: t.model_copy(update={"q_and_a": [*t.q_and_a, QAndAEntry()]}),
    )


def _update_q_and_a(project: Project, command: UpdateQAndA) -> Project:
    if command.field not in QANDA_FIELDS:
        return project
    task = find_task(project, command.milestone_id, command.task_id)
    if task is None or not 0 <= command.index < len(task.q_and_a):
        return project

    def update_entry(t: Task) -> Task:
        entries = [
            entry.model_copy(update={command.field: command.value}) if i == command.index else entry
            for i, entry in enumerate(t.q_and_a)
        ]
        return t.model_copy(update={"q_and_a": entries})

    return _map_task(project, command.milestone_id, command.task_id, update_entry)


def _delete_q_and_a(project: Project, command: DeleteQAndA) -> Project:
    task = find_task(project, command.milestone_id, command.task_id)
    if task is None or not 0 <= command.index < len(task.q_and_a):
        return project

    def remove_entry(t: Task) -> Task:
        entries = [entry for i, entry in enumerate(t.q_and_a) if i != command.index]
        return t.model_copy(update={"q_and_a": entries})

    return _map_task(project, command.milestone_id, command.task_id, remove_entry)


_HANDLERS: dict[type, Callable[[Project, Command], Project]] = {
    SetProjectField: _set_project_field,
    LoadProject: _load_project,
    UpdateRemarks: _update_remarks,
    AddMilestone: _add_milestone,
    UpdateMilestone: _update_milestone,
    DeleteMilestone: _delete_milestone,
    AddTask: _add_task,
    UpdateTask: _update_task,
    UpdateEstimate: _update_estimate,
    DeleteTask: _delete_task,
    MoveTask: _move_task,
    AddQAndA: _add_q_and_a,
    UpdateQAndA: _update_q_and_a,
    DeleteQAndA: _delete_q_and_a,
}


def apply_command(project: Project, command: Command) -> Project:
    """Apply one command and return the resulting project.

    Args:
        project: Current project value (left untouched).
        command: Any member of the ``Command`` union.

    Returns:
        The new project, or ``project`` itself when the command refers to
        something that does not exist.

    Raises:
        TypeError: If command is not a known command type.
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unknown command type: {type(command).__name__}")
    return handler(project, command)
