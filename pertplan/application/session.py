"""Editing session: the command-dispatch loop around the project store.

The session holds the current Project value and folds commands into it
through ``apply_command``. Derived views are recomputed from the current
value on every call.
"""

import logging
from collections.abc import Iterable

from pertplan.domain.estimation import ProjectSummary, project_summary
from pertplan.domain.project import Command, Project, apply_command, initial_project

from .export_service import ProjectReport, build_report, export_csv, export_json

logger = logging.getLogger(__name__)


class ProjectSession:
    """Single-writer holder of the current project.

    Example:
        session = ProjectSession()
        session.dispatch(AddTask(milestone_id="A"))
        session.dispatch(UpdateEstimate(milestone_id="A", task_id="A1",
                                        which=EstimateKind.MOST_LIKELY, value=8))
        print(session.summary().grand_total)
    """

    def __init__(self, project: Project | None = None) -> None:
        self._project = project if project is not None else initial_project()

    @property
    def project(self) -> Project:
        return self._project

    def dispatch(self, command: Command) -> Project:
        """Apply one command and make the result current."""
        new_project = apply_command(self._project, command)
        if new_project is self._project:
            logger.debug(f"{type(command).__name__} left the project unchanged")
        else:
            logger.debug(f"Applied {type(command).__name__}")
        self._project = new_project
        return new_project

    def dispatch_all(self, commands: Iterable[Command]) -> Project:
        """Apply commands in order and return the final project."""
        for command in commands:
            self.dispatch(command)
        return self._project

    def summary(self) -> ProjectSummary:
        return project_summary(self._project)

    def to_json(self) -> str:
        return export_json(self._project)

    def to_csv(self) -> str:
        return export_csv(self._project)

    def to_report(self) -> ProjectReport:
        return build_report(self._project)
