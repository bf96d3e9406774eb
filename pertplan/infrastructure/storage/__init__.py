"""Storage infrastructure.

Snapshot file persistence using Result values for explicit error handling.
"""

from pertplan.infrastructure.storage.json_storage import JsonStorage
from pertplan.infrastructure.storage.repositories import SnapshotRepository

__all__ = [
    "JsonStorage",
    "SnapshotRepository",
]
