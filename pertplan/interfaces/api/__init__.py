"""HTTP interface for pertplan (FastAPI)."""

from pertplan.interfaces.api.routes import create_app, router

__all__ = ["router", "create_app"]
