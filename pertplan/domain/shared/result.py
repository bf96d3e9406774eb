"""Ok/Err values for failures that callers are expected to handle.

Reading a snapshot can fail for ordinary reasons: the file is missing, the
JSON is broken, the snapshot is not a project. The storage layer returns
one of these values instead of raising, and the CLI turns ``Err`` into an
error message and exit code.

Example usage:
    >>> result = SnapshotRepository().load(Path("pert-estimation.json"))
    >>> if isinstance(result, Err):
    ...     print(result.error)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """The operation produced ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """The operation failed; ``error`` is a message fit for the user."""

    error: E


# Union because the TypeVar alias cannot use | at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007
