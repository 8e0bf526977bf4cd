"""Squash every commit ahead of the upstream trunk into one.

Split in two so the CLI can ask for confirmation and a commit message between
counting and squashing.
"""

from collections.abc import Generator

from devscripts.core.context import DevScriptsContext
from devscripts.events import CompletionEvent, ProgressEvent
from devscripts.operations.types import SquashError, SquashSuccess


def count_squashable_commits(ctx: DevScriptsContext) -> int:
    """Number of commits on HEAD that are not on the upstream trunk.

    Raises:
        RuntimeError: If the upstream ref cannot be resolved (never fetched)
    """
    return ctx.git.count_commits_ahead(ctx.cwd, ctx.config.upstream_ref)


def execute_squash(
    ctx: DevScriptsContext,
    *,
    commit_count: int,
    message: str,
) -> Generator[ProgressEvent | CompletionEvent[SquashSuccess | SquashError]]:
    """Soft-reset commit_count commits and re-commit them as one.

    The message is validated before anything is reset, so an empty message
    leaves history untouched.

    Args:
        ctx: Application context
        commit_count: Commits to fold together, from count_squashable_commits()
        message: Commit message for the squashed commit

    Yields:
        ProgressEvent for status updates
        CompletionEvent with SquashSuccess or SquashError
    """
    commit_message = message.strip()
    if not commit_message:
        yield CompletionEvent(
            SquashError(
                error="empty_message",
                message="Aborting squash due to empty commit message.",
            )
        )
        return

    yield ProgressEvent("Squashing commits...")
    try:
        ctx.git.reset_soft(ctx.cwd, commit_count)
    except RuntimeError as e:
        yield CompletionEvent(SquashError(error="squash_failed", message=str(e)))
        return

    try:
        ctx.git.commit(ctx.cwd, commit_message)
    except RuntimeError as e:
        yield CompletionEvent(
            SquashError(
                error="squash_failed",
                message=(
                    f"{e}\nYour changes are still staged. "
                    "Restore the original commits with: git reset --soft ORIG_HEAD"
                ),
            )
        )
        return

    yield ProgressEvent("Commits squashed successfully!", style="success")
    yield CompletionEvent(
        SquashSuccess(
            commit_count=commit_count,
            message=f"Squashed {commit_count} commits into 1.",
        )
    )
