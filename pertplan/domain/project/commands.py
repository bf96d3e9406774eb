"""Commands accepted by the project store.

Each structural or field edit is a frozen pydantic model tagged by its
``type`` literal, so commands can be built in Python or decoded from JSON
(``{"type": "AddTask", "milestoneId": "A"}``) into the same union.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from .models import Project


class EstimateKind(str, Enum):
    """Which of the three PERT estimates an edit targets."""

    OPTIMISTIC = "optimistic"
    MOST_LIKELY = "mostLikely"
    PESSIMISTIC = "pessimistic"

    @property
    def attribute(self) -> str:
        """Name of the matching attribute on ``Estimates``."""
        return {
            EstimateKind.OPTIMISTIC: "optimistic",
            EstimateKind.MOST_LIKELY: "most_likely",
            EstimateKind.PESSIMISTIC: "pessimistic",
        }[self]


class CommandModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Project-level
# =============================================================================


class SetProjectField(CommandModel):
    """Patch ``clientName`` or ``projectName``."""

    type: Literal["SetProjectField"] = "SetProjectField"
    field: str
    value: str


class LoadProject(CommandModel):
    """Replace the whole project with an imported snapshot."""

    type: Literal["LoadProject"] = "LoadProject"
    project: Project


class UpdateRemarks(CommandModel):
    type: Literal["UpdateRemarks"] = "UpdateRemarks"
    value: str


# =============================================================================
# Milestones
# =============================================================================


class AddMilestone(CommandModel):
    type: Literal["AddMilestone"] = "AddMilestone"


class UpdateMilestone(CommandModel):
    """Patch ``name`` or ``isEnabled`` of one milestone."""

    type: Literal["UpdateMilestone"] = "UpdateMilestone"
    milestone_id: str
    field: str
    value: bool | str


class DeleteMilestone(CommandModel):
    type: Literal["DeleteMilestone"] = "DeleteMilestone"
    milestone_id: str


# =============================================================================
# Tasks
# =============================================================================


class AddTask(CommandModel):
    type: Literal["AddTask"] = "AddTask"
    milestone_id: str


class UpdateTask(CommandModel):
    """Patch one task field.

    ``field`` is a scalar field name (``name``, ``description``, ``tests``,
    ``definitionOfDone``, ``isEnabled``) or an estimate path such as
    ``estimates.mostLikely``. Prefer ``UpdateEstimate`` for estimates.
    """

    type: Literal["UpdateTask"] = "UpdateTask"
    milestone_id: str
    task_id: str
    field: str
    value: bool | float | str


class UpdateEstimate(CommandModel):
    """Set one of a task's three estimates."""

    type: Literal["UpdateEstimate"] = "UpdateEstimate"
    milestone_id: str
    task_id: str
    which: EstimateKind
    value: float


class DeleteTask(CommandModel):
    type: Literal["DeleteTask"] = "DeleteTask"
    milestone_id: str
    task_id: str


class MoveTask(CommandModel):
    """Move a task to the end of another milestone."""

    type: Literal["MoveTask"] = "MoveTask"
    source_milestone_id: str
    dest_milestone_id: str
    task_id: str


# =============================================================================
# Q&A entries
# =============================================================================


class AddQAndA(CommandModel):
    type: Literal["AddQAndA"] = "AddQAndA"
    milestone_id: str
    task_id: str


class UpdateQAndA(CommandModel):
    type: Literal["UpdateQAndA"] = "UpdateQAndA"
    milestone_id: str
    task_id: str
    index: int
    field: str
    value: str


class DeleteQAndA(CommandModel):
    type: Literal["DeleteQAndA"] = "DeleteQAndA"
    milestone_id: str
    task_id: str
    index: int


Command = Annotated[
    Union[  # noqa: UP007
        SetProjectField,
        LoadProject,
        UpdateRemarks,
        AddMilestone,
        UpdateMilestone,
        DeleteMilestone,
        AddTask,
        UpdateTask,
        UpdateEstimate,
        DeleteTask,
        MoveTask,
        AddQAndA,
        UpdateQAndA,
        DeleteQAndA,
    ],
    Field(discriminator="type"),
]

_command_adapter: TypeAdapter[Command] = TypeAdapter(Command)


def parse_command(data: Any) -> Command:
    """Decode a command from its JSON form.

    Raises:
        pydantic.ValidationError: If ``type`` is unknown or a required
            payload field is missing.
    """
    return _command_adapter.validate_python(data)
