"""Rebase the working branch onto the freshly fetched upstream trunk."""

import logging
from collections.abc import Generator

from devscripts.core.context import DevScriptsContext
from devscripts.events import CompletionEvent, ProgressEvent
from devscripts.operations.types import SyncError, SyncSuccess

logger = logging.getLogger(__name__)


def execute_sync(
    ctx: DevScriptsContext,
) -> Generator[ProgressEvent | CompletionEvent[SyncSuccess | SyncError]]:
    """Fetch the trunk and rebase the current branch onto it.

    The uncommitted-changes check runs after the fetch, so the remote-tracking
    ref is up to date even when the rebase is refused. A conflicting rebase is
    left in progress for the user to resolve or abort.

    Yields:
        ProgressEvent for status updates
        CompletionEvent with SyncSuccess or SyncError
    """
    config = ctx.config
    repo_root = ctx.project_root
    upstream = config.upstream_ref

    yield ProgressEvent(f"Syncing with upstream {config.trunk}...")

    # Step 1: Fetch latest changes
    try:
        ctx.git.fetch_branch(repo_root, config.remote, config.trunk)
    except RuntimeError as e:
        yield CompletionEvent(SyncError(error="fetch_failed", message=str(e)))
        return

    # Step 2: Refuse to rebase a dirty tree
    try:
        dirty = ctx.git.has_uncommitted_changes(ctx.cwd)
    except RuntimeError as e:
        yield CompletionEvent(SyncError(error="status_failed", message=str(e)))
        return
    if dirty:
        yield CompletionEvent(
            SyncError(
                error="uncommitted_changes",
                message="You have uncommitted changes. Please commit or stash them first.",
            )
        )
        return

    # Step 3: Rebase on the trunk
    yield ProgressEvent(f"Rebasing on {upstream}...")
    result = ctx.git.rebase_onto(ctx.cwd, upstream)
    if not result.success:
        logger.debug("Rebase onto %s failed, conflicts: %s", upstream, result.conflict_files)
        if result.conflict_files:
            yield CompletionEvent(
                SyncError(
                    error="rebase_conflict",
                    message=f"Rebase onto {upstream} stopped with conflicts.",
                    conflict_files=result.conflict_files,
                )
            )
        else:
            message = f"Rebase onto {upstream} failed."
            if result.error_message:
                message += f"\n{result.error_message}"
            yield CompletionEvent(SyncError(error="rebase_failed", message=message))
        return

    yield ProgressEvent("Sync complete!", style="success")
    yield CompletionEvent(SyncSuccess(message="Sync complete!"))
