"""Git operations interface.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
- DryRunGit: Wrapper that prints mutations instead of running them
"""

from abc import ABC, abstractmethod
from pathlib import Path

from devscripts.gateway.git.types import PushError, PushResult, RebaseResult


class Git(ABC):
    """Abstract interface for the git operations used by the workflow commands.

    All implementations (real, fake, dry-run) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the repository root directory, or None outside a repository."""
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch.

        Returns:
            Branch name, or None when HEAD is detached
        """
        ...

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check whether tracked files differ from HEAD.

        Uses `git diff-index --quiet HEAD --`, so untracked files do not count.

        Raises:
            RuntimeError: If git cannot compare against HEAD
        """
        ...

    @abstractmethod
    def count_commits_ahead(self, cwd: Path, base_ref: str) -> int:
        """Count commits in HEAD that are not in base_ref.

        Args:
            cwd: Working directory
            base_ref: Ref to compare against (e.g., "origin/main")

        Raises:
            RuntimeError: If base_ref cannot be resolved
        """
        ...

    @abstractmethod
    def get_conflicted_files(self, cwd: Path) -> list[str]:
        """Get list of files with merge conflicts from git status --porcelain.

        Returns file paths with conflict status codes (UU, AA, DD, AU, UA, DU, UD).
        """
        ...

    @abstractmethod
    def get_remote_url(self, repo_root: Path, remote: str) -> str | None:
        """Get the URL for a git remote, or None if the remote is not configured."""
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        """Fetch a specific branch from a remote.

        Raises:
            RuntimeError: If the fetch fails or times out
        """
        ...

    @abstractmethod
    def rebase_onto(self, cwd: Path, target_ref: str) -> RebaseResult:
        """Rebase the current branch onto a target ref.

        Returns:
            RebaseResult with success flag and any conflict files.
            If conflicts occur, the rebase is left in progress.
        """
        ...

    @abstractmethod
    def reset_soft(self, cwd: Path, commit_count: int) -> None:
        """Move HEAD back by commit_count commits, keeping changes staged.

        Raises:
            RuntimeError: If git command fails
        """
        ...

    @abstractmethod
    def commit(self, cwd: Path, message: str) -> None:
        """Create a commit with staged changes.

        Raises:
            RuntimeError: If git command fails
        """
        ...

    @abstractmethod
    def push_to_remote(
        self, cwd: Path, remote: str, branch: str, *, force: bool
    ) -> PushResult | PushError:
        """Push a branch to a remote.

        Args:
            cwd: Working directory
            remote: Remote name (e.g., "origin")
            branch: Branch name to push
            force: If True, force push (-f flag)
        """
        ...
