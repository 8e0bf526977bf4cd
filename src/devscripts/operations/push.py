"""Force-push the working branch and point at the pull request compare page."""

from collections.abc import Generator

from devscripts.core.context import DevScriptsContext
from devscripts.core.github_url import compare_url, parse_github_repo
from devscripts.events import CompletionEvent, ProgressEvent
from devscripts.gateway.git.types import PushError
from devscripts.operations.types import PushFailed, PushSuccess


def resolve_github_repo(ctx: DevScriptsContext) -> str | None:
    """Configured "owner/name", falling back to the one in the remote URL."""
    if ctx.config.github_repo:
        return ctx.config.github_repo
    remote_url = ctx.git.get_remote_url(ctx.project_root, ctx.config.remote)
    if remote_url is None:
        return None
    return parse_github_repo(remote_url)


def execute_push(
    ctx: DevScriptsContext,
    *,
    branch: str,
) -> Generator[ProgressEvent | CompletionEvent[PushSuccess | PushFailed]]:
    """Force-push branch to the configured remote.

    Yields:
        ProgressEvent for status updates and next steps
        CompletionEvent with PushSuccess (carrying the compare URL when the
        GitHub repository is known) or PushFailed
    """
    config = ctx.config
    result = ctx.git.push_to_remote(ctx.cwd, config.remote, branch, force=True)
    if isinstance(result, PushError):
        yield CompletionEvent(PushFailed(message=result.message))
        return

    yield ProgressEvent("Pushed successfully!", style="success")
    yield ProgressEvent(f"Next step: Create PR from {branch} to {config.trunk}")

    repo = resolve_github_repo(ctx)
    url = compare_url(repo, config.trunk, branch) if repo is not None else None
    if url is not None:
        yield ProgressEvent(f"GitHub URL: {url}")

    yield CompletionEvent(
        PushSuccess(branch=branch, compare_url=url, message="Pushed successfully!")
    )
