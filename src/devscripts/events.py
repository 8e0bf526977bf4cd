"""Event types yielded by operation generators.

Operations yield ProgressEvent for status updates and finish with exactly one
CompletionEvent carrying the result. CLI layers consume the stream and handle
rendering.
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

EventStyle = Literal["info", "success", "warning", "error"]


@dataclass(frozen=True)
class ProgressEvent:
    """Progress notification emitted during an operation."""

    message: str
    style: EventStyle = "info"


@dataclass(frozen=True)
class CompletionEvent(Generic[T]):
    """Final event of an operation, carrying its result."""

    result: T
