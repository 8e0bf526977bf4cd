"""No-op Git wrapper for dry-run mode.

This module provides a Git wrapper that prevents execution of destructive
operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from devscripts.gateway.git.abc import Git
from devscripts.gateway.git.types import PushError, PushResult, RebaseResult
from devscripts.output import user_output


class DryRunGit(Git):
    """No-op wrapper that prevents execution of destructive operations.

    Mutations print what would happen and report success. Read-only operations
    are delegated to the wrapped implementation.

    Usage:
        real_ops = RealGit()
        noop_ops = DryRunGit(real_ops)
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._wrapped.get_repository_root(cwd)

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_current_branch(cwd)

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return self._wrapped.has_uncommitted_changes(cwd)

    def count_commits_ahead(self, cwd: Path, base_ref: str) -> int:
        return self._wrapped.count_commits_ahead(cwd, base_ref)

    def get_conflicted_files(self, cwd: Path) -> list[str]:
        return self._wrapped.get_conflicted_files(cwd)

    def get_remote_url(self, repo_root: Path, remote: str) -> str | None:
        return self._wrapped.get_remote_url(repo_root, remote)

    # ============================================================================
    # Mutation Operations (print and skip)
    # ============================================================================

    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        user_output(f"[DRY RUN] Would run: git fetch {remote} {branch}")

    def rebase_onto(self, cwd: Path, target_ref: str) -> RebaseResult:
        user_output(f"[DRY RUN] Would run: git rebase {target_ref}")
        return RebaseResult(success=True, conflict_files=())

    def reset_soft(self, cwd: Path, commit_count: int) -> None:
        user_output(f"[DRY RUN] Would run: git reset --soft HEAD~{commit_count}")

    def commit(self, cwd: Path, message: str) -> None:
        first_line = message.splitlines()[0] if message else ""
        user_output(f'[DRY RUN] Would run: git commit -m "{first_line}"')

    def push_to_remote(
        self, cwd: Path, remote: str, branch: str, *, force: bool
    ) -> PushResult | PushError:
        force_flag = " -f" if force else ""
        user_output(f"[DRY RUN] Would run: git push{force_flag} {remote} {branch}")
        return PushResult()
