"""FastAPI routes for pertplan.

One in-process ``ProjectSession`` backs the API; it is stored on
``app.state.session`` and shared by every request (single user, single
writer).
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from pertplan import __version__
from pertplan.application import ProjectReport, ProjectSession, csv_filename
from pertplan.domain.estimation import ProjectSummary
from pertplan.domain.project import (
    Command,
    InvalidSnapshotError,
    LoadProject,
    Project,
    parse_command,
)
from pertplan.interfaces.api.schemas import CommandResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _session(request: Request) -> ProjectSession:
    return request.app.state.session


# =============================================================================
# Project
# =============================================================================


@router.get("/project")
def get_project(request: Request) -> dict[str, Any]:
    """Return the current project snapshot."""
    return _session(request).project.to_snapshot()


@router.post("/project")
def load_project(request: Request, snapshot: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """Replace the current project with an imported snapshot."""
    try:
        project = Project.from_snapshot(snapshot)
    except InvalidSnapshotError as e:
        raise HTTPException(status_code=400, detail=str(e))

    session = _session(request)
    session.dispatch(LoadProject(project=project))
    logger.info(f"Loaded project '{project.project_name}'")
    return session.project.to_snapshot()


@router.get("/summary", response_model=ProjectSummary)
def get_summary(request: Request):
    """Per-milestone totals and the grand total."""
    return _session(request).summary()


# =============================================================================
# Commands
# =============================================================================


@router.post("/commands", response_model=CommandResponse)
def dispatch_command(request: Request, payload: dict[str, Any] = Body(...)):
    """Apply one command, e.g. ``{"type": "AddTask", "milestoneId": "A"}``."""
    try:
        command: Command = parse_command(payload)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    session = _session(request)
    before = session.project
    after = session.dispatch(command)
    return CommandResponse(
        changed=after is not before,
        project=after.to_snapshot(),
        summary=session.summary(),
    )


# =============================================================================
# Exports
# =============================================================================


@router.get("/export/json")
def export_json(request: Request) -> Response:
    """The snapshot as a downloadable JSON document."""
    return Response(
        content=_session(request).to_json(),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="pert-estimation.json"'},
    )


@router.get("/export/csv", response_class=PlainTextResponse)
def export_csv(request: Request) -> PlainTextResponse:
    """Redmine import CSV of enabled tasks."""
    session = _session(request)
    filename = csv_filename(session.project)
    return PlainTextResponse(
        content=session.to_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/export/report", response_model=ProjectReport)
def export_report(request: Request):
    """Report view model for an external renderer."""
    return _session(request).to_report()


def create_app(project: Project | None = None) -> FastAPI:
    """Create the FastAPI application around a fresh session."""
    app = FastAPI(
        title="pertplan",
        description="PERT project estimation",
        version=__version__,
    )
    app.state.session = ProjectSession(project)
    app.include_router(router)

    @app.get("/")
    def root():
        return {"name": "pertplan", "version": __version__}

    return app
