"""Project domain models.

The estimation hierarchy is Project -> Milestone -> Task -> QAndAEntry.
Models are frozen pydantic models; every change produces a new value via
``model_copy``. Field names are snake_case in Python and camelCase in the
persisted JSON snapshot, which is the import/export format.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

DEFAULT_PROJECT_NAME = "New Project Estimation"
DEFAULT_TASK_NAME = "New Task"
DEFAULT_REMARKS = (
    "## General Remarks\n\n"
    "- This section uses Markdown for formatting.\n"
    "- Notes here are for internal reference and will not be included in any exports."
)


class InvalidSnapshotError(ValueError):
    """Raised when an imported snapshot fails the minimum shape check."""


class SnapshotModel(BaseModel):
    """Base for models that round-trip through the JSON snapshot."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Estimates(SnapshotModel):
    """Three-point PERT estimate in hours."""

    optimistic: float = 0.0
    most_likely: float = 0.0
    pessimistic: float = 0.0


class QAndAEntry(SnapshotModel):
    """A question/answer pair attached to a task.

    Entries have no id of their own; they are addressed by list index.
    """

    question: str = ""
    answer: str = ""


class Task(SnapshotModel):
    """A unit of estimated work inside a milestone.

    The id is the owning milestone id followed by the 1-based position,
    e.g. "A3". It is reassigned whenever the task list changes shape.
    """

    id: str = ""
    name: str = DEFAULT_TASK_NAME
    description: str = ""
    estimates: Estimates = Field(default_factory=Estimates)
    tests: str = ""
    definition_of_done: str = ""
    q_and_a: list[QAndAEntry] = Field(default_factory=list)
    is_enabled: bool = True


class Milestone(SnapshotModel):
    """An ordered group of tasks, identified by letter (A, B, C, ...).

    A disabled milestone contributes nothing to totals, whatever the
    enabled flags of its tasks say.
    """

    id: str = ""
    name: str = ""
    is_enabled: bool = True
    tasks: list[Task] = Field(default_factory=list)


class Project(SnapshotModel):
    """Root aggregate: one estimation project.

    ``remarks`` is free-form Markdown for internal notes and is part of the
    snapshot, but never appears in CSV or report exports.
    """

    client_name: str = ""
    project_name: str = DEFAULT_PROJECT_NAME
    milestones: list[Milestone] = Field(default_factory=list)
    remarks: str = ""

    def to_snapshot(self) -> dict[str, Any]:
        """Serialize to the camelCase snapshot dictionary."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_snapshot(cls, data: Any) -> "Project":
        """Build a Project from a decoded snapshot.

        Only the minimum import check is applied: ``milestones`` must be a
        list and ``projectName`` must be present. Anything else missing is
        filled with defaults.

        Raises:
            InvalidSnapshotError: If the minimum check fails or the values
                cannot be coerced into the model types.
        """
        if not isinstance(data, dict):
            raise InvalidSnapshotError("Snapshot must be a JSON object")
        if not isinstance(data.get("milestones"), list):
            raise InvalidSnapshotError("Snapshot is missing a 'milestones' list")
        if "projectName" not in data and "project_name" not in data:
            raise InvalidSnapshotError("Snapshot is missing 'projectName'")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidSnapshotError(f"Snapshot has invalid values: {e}") from e


def initial_project() -> Project:
    """Return the starting state of a fresh estimation."""
    return Project(
        client_name="",
        project_name=DEFAULT_PROJECT_NAME,
        milestones=[Milestone(id="A", name="Milestone A", is_enabled=True, tasks=[])],
        remarks=DEFAULT_REMARKS,
    )
