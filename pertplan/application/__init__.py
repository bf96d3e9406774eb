"""Application layer: exports and the editing session.

Services:
    export_service - JSON snapshot, Redmine CSV and report view model
    session - ProjectSession, the command-dispatch loop

Example usage:
    >>> from pertplan.application import ProjectSession
    >>> from pertplan.domain.project import AddTask
    >>>
    >>> session = ProjectSession()
    >>> session.dispatch(AddTask(milestone_id="A"))
    >>> print(session.to_csv())
"""

from pertplan.application.export_service import (
    CSV_HEADER,
    DEFAULT_JSON_FILENAME,
    ProjectReport,
    ReportMilestone,
    ReportTask,
    build_report,
    csv_description,
    csv_filename,
    export_csv,
    export_json,
    load_json,
    report_filename,
    report_title,
)
from pertplan.application.session import ProjectSession

__all__ = [
    # Exports
    "CSV_HEADER",
    "DEFAULT_JSON_FILENAME",
    "export_json",
    "load_json",
    "export_csv",
    "csv_description",
    "csv_filename",
    "build_report",
    "report_title",
    "report_filename",
    "ProjectReport",
    "ReportMilestone",
    "ReportTask",
    # Session
    "ProjectSession",
]
