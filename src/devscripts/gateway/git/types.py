"""Result types for git operations whose failure is an expected outcome."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RebaseResult:
    """Result of a git rebase operation.

    Attributes:
        success: True if rebase completed without conflicts
        conflict_files: Tuple of file paths with conflicts (empty if success=True)
        error_message: What git printed when the rebase failed, empty otherwise
    """

    success: bool
    conflict_files: tuple[str, ...]
    error_message: str = ""


@dataclass(frozen=True)
class PushResult:
    """Success result from pushing to remote."""


@dataclass(frozen=True)
class PushError:
    """Error result from pushing to remote."""

    message: str
