"""Shared domain utilities.

- Result type (``Ok``/``Err``) for failures that are expected rather than
  exceptional, used by the storage layer.
"""

from pertplan.domain.shared.result import Err, Ok, Result

__all__ = [
    "Ok",
    "Err",
    "Result",
]
