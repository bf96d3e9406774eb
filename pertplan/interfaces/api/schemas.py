"""Request/response schemas for the pertplan HTTP API.

Commands and the project snapshot reuse the domain models directly; only
the wrappers that exist for the API live here.
"""

from typing import Any

from pydantic import BaseModel

from pertplan.domain.estimation import ProjectSummary


class CommandResponse(BaseModel):
    """Result of dispatching one command."""

    changed: bool
    project: dict[str, Any]
    summary: ProjectSummary
