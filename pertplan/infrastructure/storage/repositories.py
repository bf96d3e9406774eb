"""Snapshot persistence.

Loads and saves the project snapshot file (the same JSON the export
produces) with Result-based error handling.
"""

import logging
from pathlib import Path

from pertplan.domain.project import InvalidSnapshotError, Project
from pertplan.domain.shared.result import Err, Ok, Result
from pertplan.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class SnapshotRepository:
    """Repository for project snapshot files."""

    def __init__(self, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self._storage = storage or JsonStorage()

    def load(self, path: Path) -> Result[Project, str]:
        """Load a project snapshot.

        Returns:
            Ok(Project) if successful, Err(str) if the file is missing,
            unreadable, or fails the snapshot check.
        """
        result = self._storage.read(path)
        if isinstance(result, Err):
            return result

        try:
            project = Project.from_snapshot(result.value)
        except InvalidSnapshotError as e:
            logger.warning(f"Rejected snapshot {path}: {e}")
            return Err(f"Invalid snapshot in {path}: {e}")
        return Ok(project)

    def save(self, path: Path, project: Project) -> Result[None, str]:
        """Write a project snapshot.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        return self._storage.write(path, project.to_snapshot())

    def exists(self, path: Path) -> bool:
        return path.exists()
