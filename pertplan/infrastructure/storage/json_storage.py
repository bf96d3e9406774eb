"""Snapshot file I/O.

Reads and writes JSON documents and reports failures as ``Err`` values.
Writes go to a sibling temporary file that then replaces the target, so an
interrupted save leaves the previous snapshot intact.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pertplan.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class JsonStorage:
    """Plain JSON documents on disk, no project knowledge.

    Example:
        storage = JsonStorage()
        result = storage.read(Path("pert-estimation.json"))
        if isinstance(result, Err):
            print(result.error)
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def read(self, path: Path) -> Result[Any, str]:
        """Decode the JSON document at path."""
        if not path.is_file():
            return Err(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except (OSError, UnicodeDecodeError) as e:
            return Err(f"Error reading {path}: {e}")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")

        logger.debug(f"Read {len(text)} characters from {path}")
        return Ok(data)

    def write(self, path: Path, data: Any) -> Result[None, str]:
        """Encode data and replace the file at path with it.

        Parent directories are created as needed. Non-ASCII text is written
        as UTF-8 rather than escaped.
        """
        try:
            text = json.dumps(data, indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            return Err(f"Data not JSON serializable: {e}")

        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            os.replace(tmp_path, path)
        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            return Err(f"Error writing {path}: {e}")

        logger.debug(f"Wrote {len(text)} characters to {path}")
        return Ok(None)
