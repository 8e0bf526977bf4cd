"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path
from typing import NamedTuple

from devscripts.gateway.git.abc import Git
from devscripts.gateway.git.types import PushError, PushResult, RebaseResult


class PushedBranch(NamedTuple):
    """Record of a branch push operation."""

    remote: str
    branch: str
    force: bool


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    State Management:
    -----------------
    This fake maintains mutable state to simulate git's stateful behavior.
    reset_soft() and commit() update the commits-ahead counts for the
    working directory, so a squash leaves exactly one commit ahead.

    Constructor Injection:
    ---------------------
    All INITIAL state is provided via constructor. Runtime mutations occur
    through operation methods.

    Mutation Tracking:
    -----------------
    - fetched_branches: (repo_root, remote, branch) from fetch_branch()
    - rebase_onto_calls: (cwd, target_ref) from rebase_onto()
    - reset_soft_calls: (cwd, commit_count) from reset_soft()
    - commits: (cwd, message) from commit()
    - pushed_branches: PushedBranch records from push_to_remote()

    Examples:
    ---------
        git = FakeGit(
            current_branches={repo: "feature"},
            commits_ahead={(repo, "origin/main"): 3},
        )
        git.reset_soft(repo, 3)
        git.commit(repo, "Squashed")
        assert git.count_commits_ahead(repo, "origin/main") == 1
    """

    def __init__(
        self,
        *,
        repository_roots: dict[Path, Path] | None = None,
        current_branches: dict[Path, str | None] | None = None,
        dirty_worktrees: set[Path] | None = None,
        commits_ahead: dict[tuple[Path, str], int] | None = None,
        conflicted_files: list[str] | None = None,
        remote_urls: dict[tuple[Path, str], str] | None = None,
        rebase_onto_result: RebaseResult | None = None,
        fetch_branch_raises: Exception | None = None,
        reset_soft_raises: Exception | None = None,
        commit_raises: Exception | None = None,
        push_error: PushError | None = None,
    ) -> None:
        self._repository_roots = repository_roots if repository_roots is not None else {}
        self._current_branches = current_branches if current_branches is not None else {}
        self._dirty_worktrees = dirty_worktrees if dirty_worktrees is not None else set()
        self._commits_ahead = dict(commits_ahead) if commits_ahead is not None else {}
        self._conflicted_files = conflicted_files if conflicted_files is not None else []
        self._remote_urls = remote_urls if remote_urls is not None else {}
        self._rebase_onto_result = rebase_onto_result
        self._fetch_branch_raises = fetch_branch_raises
        self._reset_soft_raises = reset_soft_raises
        self._commit_raises = commit_raises
        self._push_error = push_error

        # Mutation tracking
        self._fetched_branches: list[tuple[Path, str, str]] = []
        self._rebase_onto_calls: list[tuple[Path, str]] = []
        self._reset_soft_calls: list[tuple[Path, int]] = []
        self._commits: list[tuple[Path, str]] = []
        self._pushed_branches: list[PushedBranch] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._repository_roots.get(cwd, cwd)

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branches.get(cwd)

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return cwd in self._dirty_worktrees

    def count_commits_ahead(self, cwd: Path, base_ref: str) -> int:
        return self._commits_ahead.get((cwd, base_ref), 0)

    def get_conflicted_files(self, cwd: Path) -> list[str]:
        return list(self._conflicted_files)

    def get_remote_url(self, repo_root: Path, remote: str) -> str | None:
        return self._remote_urls.get((repo_root, remote))

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def fetch_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        if self._fetch_branch_raises is not None:
            raise self._fetch_branch_raises
        self._fetched_branches.append((repo_root, remote, branch))

    def rebase_onto(self, cwd: Path, target_ref: str) -> RebaseResult:
        """Returns the configured rebase_onto_result if set, otherwise success."""
        self._rebase_onto_calls.append((cwd, target_ref))
        if self._rebase_onto_result is not None:
            return self._rebase_onto_result
        return RebaseResult(success=True, conflict_files=())

    def reset_soft(self, cwd: Path, commit_count: int) -> None:
        if self._reset_soft_raises is not None:
            raise self._reset_soft_raises
        self._reset_soft_calls.append((cwd, commit_count))
        for key, count in self._commits_ahead.items():
            if key[0] == cwd:
                self._commits_ahead[key] = max(count - commit_count, 0)

    def commit(self, cwd: Path, message: str) -> None:
        if self._commit_raises is not None:
            raise self._commit_raises
        self._commits.append((cwd, message))
        for key, count in self._commits_ahead.items():
            if key[0] == cwd:
                self._commits_ahead[key] = count + 1

    def push_to_remote(
        self, cwd: Path, remote: str, branch: str, *, force: bool
    ) -> PushResult | PushError:
        if self._push_error is not None:
            return self._push_error
        self._pushed_branches.append(PushedBranch(remote=remote, branch=branch, force=force))
        return PushResult()

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def fetched_branches(self) -> list[tuple[Path, str, str]]:
        """Read-only access to fetch_branch calls for test assertions."""
        return list(self._fetched_branches)

    @property
    def rebase_onto_calls(self) -> list[tuple[Path, str]]:
        """Read-only access to rebase_onto calls for test assertions."""
        return list(self._rebase_onto_calls)

    @property
    def reset_soft_calls(self) -> list[tuple[Path, int]]:
        """Read-only access to reset_soft calls for test assertions."""
        return list(self._reset_soft_calls)

    @property
    def commits(self) -> list[tuple[Path, str]]:
        """Read-only access to commits created for test assertions."""
        return list(self._commits)

    @property
    def pushed_branches(self) -> list[PushedBranch]:
        """Read-only access to pushes for test assertions."""
        return list(self._pushed_branches)
