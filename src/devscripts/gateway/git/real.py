"""Production Git implementation using subprocess."""

import logging
import os
import subprocess
from pathlib import Path

from devscripts.gateway.git.abc import Git
from devscripts.gateway.git.types import PushError, PushResult, RebaseResult
from devscripts.subprocess_utils import (
    copied_env_for_git_subprocess,
    run_subprocess_with_context,
)

logger = logging.getLogger(__name__)

# Timeout in seconds for network-touching git operations (push, fetch).
_GIT_NETWORK_TIMEOUT = 120

_CONFLICT_CODES = frozenset({"UU", "AA", "DD", "AU", "UA", "DU", "UD"})


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_repository_root(self, cwd: Path) -> Path | None:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch == "HEAD":
            return None

        return branch

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        # Refresh the index first; diff-index alone reports files whose stat
        # info changed even when their content did not.
        subprocess.run(
            ["git", "update-index", "-q", "--refresh"],
            cwd=cwd,
            capture_output=True,
            check=False,
        )
        result = subprocess.run(
            ["git", "diff-index", "--quiet", "HEAD", "--"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode in (0, 1):
            return result.returncode == 1
        raise RuntimeError(
            "Failed to check for uncommitted changes\n"
            f"Command: git diff-index --quiet HEAD --\nExit code: {result.returncode}\n"
            f"stderr: {result.stderr.strip()}"
        )

    def count_commits_ahead(self, cwd: Path, base_ref: str) -> int:
        result = run_subprocess_with_context(
            cmd=["git", "rev-list", "--count", f"{base_ref}..HEAD"],
            operation_context=f"count commits ahead of '{base_ref}'",
            cwd=cwd,
        )
        return int(result.stdout.strip())

    def get_conflicted_files(self, cwd: Path) -> list[str]:
        result = subprocess.run(
            ["git", "status", "--porcelain"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return []

        conflicted = []
        for line in result.stdout.splitlines():
            if line[:2] in _CONFLICT_CODES:
                conflicted.append(line[3:])
        return conflicted

    def get_remote_url(self, repo_root: Path, remote: str) -> str | None:
        result = subprocess.run(
            ["git", "remote", "get-url", remote],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        url = result.stdout.strip()
        if not url:
            return None
        return url

    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        """Fetch a specific branch from a remote."""
        run_subprocess_with_context(
            cmd=["git", "fetch", remote, branch],
            operation_context=f"fetch branch '{branch}' from remote '{remote}'",
            cwd=repo_root,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )

    def rebase_onto(self, cwd: Path, target_ref: str) -> RebaseResult:
        """Rebase the current branch onto a target ref."""
        logger.debug("Running git rebase %s (cwd=%s)", target_ref, cwd)
        result = subprocess.run(
            ["git", "rebase", target_ref],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            env={**os.environ, "GIT_EDITOR": "true"},  # Auto-accept commit messages
        )

        if result.returncode == 0:
            return RebaseResult(success=True, conflict_files=())

        error_message = result.stderr.strip() or result.stdout.strip()
        logger.debug("git rebase failed: %s", error_message)
        conflict_files = self.get_conflicted_files(cwd)
        return RebaseResult(
            success=False, conflict_files=tuple(conflict_files), error_message=error_message
        )

    def reset_soft(self, cwd: Path, commit_count: int) -> None:
        run_subprocess_with_context(
            cmd=["git", "reset", "--soft", f"HEAD~{commit_count}"],
            operation_context=f"reset {commit_count} commits",
            cwd=cwd,
        )

    def commit(self, cwd: Path, message: str) -> None:
        """Create a commit with staged changes."""
        run_subprocess_with_context(
            cmd=["git", "commit", "-m", message],
            operation_context="create commit",
            cwd=cwd,
        )

    def push_to_remote(
        self, cwd: Path, remote: str, branch: str, *, force: bool
    ) -> PushResult | PushError:
        """Push a branch to a remote."""
        cmd = ["git", "push"]
        if force:
            cmd.append("-f")
        cmd.extend([remote, branch])

        try:
            run_subprocess_with_context(
                cmd=cmd,
                operation_context=f"push branch '{branch}' to remote '{remote}'",
                cwd=cwd,
                timeout=_GIT_NETWORK_TIMEOUT,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            return PushError(message=str(e))
        return PushResult()
