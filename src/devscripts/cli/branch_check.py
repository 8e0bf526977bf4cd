from devscripts.core.context import DevScriptsContext
from devscripts.output import print_warning, user_confirm


def check_branch(ctx: DevScriptsContext) -> str | None:
    """Warn when not on the working branch and ask whether to continue.

    Returns:
        The current branch, or None for a detached HEAD

    Raises:
        SystemExit: With code 1 if the user declines to continue
    """
    current = ctx.git.get_current_branch(ctx.cwd)
    expected = ctx.config.work_branch
    if current != expected:
        shown = current if current is not None else "HEAD"
        print_warning(f"You are on branch '{shown}', not '{expected}'")
        if not user_confirm("Continue anyway?", default=False):
            raise SystemExit(1)
    return current
