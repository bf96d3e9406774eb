"""CLI command groups for pertplan.

Command groups:
- project: snapshot setup, names, remarks, overview, import
- milestone: add/rename/enable/disable/delete milestones
- task: add/edit/estimate/move/delete tasks
- qa: per-task question and answer entries
- export: JSON snapshot, Redmine CSV, report data

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from pertplan.interfaces.cli.commands import export, milestone, project, qa, task

__all__ = ["project", "milestone", "task", "qa", "export"]
