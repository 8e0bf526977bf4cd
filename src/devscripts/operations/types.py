"""Result types for workflow operations.

Every operation ends with a CompletionEvent carrying one of these. Success and
error types are separate classes so callers narrow with isinstance().
"""

from dataclasses import dataclass
from typing import Literal

# =============================================================================
# Setup Operation Types
# =============================================================================


@dataclass(frozen=True)
class SetupSuccess:
    env_file_created: bool
    message: str


@dataclass(frozen=True)
class SetupError:
    error: Literal["install_failed", "hooks_failed", "env_example_missing"]
    message: str
    exit_code: int


# =============================================================================
# Tool Run (test / test_coverage / lint) Types
# =============================================================================


@dataclass(frozen=True)
class ToolRunSuccess:
    message: str


@dataclass(frozen=True)
class ToolRunError:
    """A developer tool exited non-zero or could not be found."""

    tool: str
    message: str
    exit_code: int


# =============================================================================
# Sync Operation Types
# =============================================================================

SyncErrorType = Literal[
    "fetch_failed",
    "status_failed",
    "uncommitted_changes",
    "rebase_conflict",
    "rebase_failed",
]


@dataclass(frozen=True)
class SyncSuccess:
    message: str


@dataclass(frozen=True)
class SyncError:
    error: SyncErrorType
    message: str
    conflict_files: tuple[str, ...] = ()


# =============================================================================
# Squash Operation Types
# =============================================================================


@dataclass(frozen=True)
class SquashSuccess:
    commit_count: int
    message: str


@dataclass(frozen=True)
class SquashError:
    error: Literal["empty_message", "squash_failed"]
    message: str


# =============================================================================
# Push Operation Types
# =============================================================================


@dataclass(frozen=True)
class PushSuccess:
    branch: str
    compare_url: str | None
    message: str


@dataclass(frozen=True)
class PushFailed:
    message: str
