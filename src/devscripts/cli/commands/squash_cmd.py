import logging
from typing import Literal

import click

from devscripts.cli.branch_check import check_branch
from devscripts.cli.ensure import Ensure, UserFacingCliError
from devscripts.cli.render import render_events
from devscripts.core.context import DevScriptsContext
from devscripts.operations.squash import count_squashable_commits, execute_squash
from devscripts.operations.types import SquashError
from devscripts.output import (
    print_error,
    print_status,
    print_warning,
    read_multiline_input,
    user_confirm,
)

logger = logging.getLogger(__name__)

SquashOutcome = Literal["nothing_to_squash", "declined", "squashed"]


def run_squash(
    ctx: DevScriptsContext,
    *,
    branch: str | None,
    message: str | None,
    assume_yes: bool,
) -> SquashOutcome:
    """Count, confirm, read the message and squash.

    Args:
        ctx: Application context
        branch: Branch named in the push reminder (falls back to the working branch)
        message: Commit message; read from stdin until EOF when None
        assume_yes: Skip the confirmation prompt

    Raises:
        SystemExit: With code 1 if the squash fails
    """
    Ensure.in_repository(ctx)
    config = ctx.config

    try:
        commit_count = count_squashable_commits(ctx)
    except RuntimeError as e:
        logger.debug("Counting commits failed: %s", e)
        raise UserFacingCliError(
            f"Could not count commits ahead of {config.upstream_ref}. "
            f"Run 'git fetch {config.remote} {config.trunk}' and try again."
        ) from e

    if commit_count == 0:
        print_warning("No commits to squash")
        return "nothing_to_squash"

    print_status(f"Found {commit_count} commits ahead of {config.trunk}")
    if not assume_yes and not user_confirm(f"Squash all {commit_count} commits?", default=False):
        return "declined"

    if message is None:
        print_status("Enter commit message (Ctrl+D when done):")
        message = read_multiline_input()

    result = render_events(execute_squash(ctx, commit_count=commit_count, message=message))
    if isinstance(result, SquashError):
        print_error(result.message)
        raise SystemExit(1)

    push_branch = branch if branch is not None else config.work_branch
    print_warning(f"Don't forget to push with: git push -f {config.remote} {push_branch}")
    return "squashed"


@click.command("squash")
@click.option("-m", "--message", default=None, help="Commit message (default: read from stdin)")
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def squash_cmd(ctx: DevScriptsContext, message: str | None, assume_yes: bool) -> None:
    """Squash all commits into one.

    Folds every commit ahead of the upstream trunk into a single commit.
    Without --message, the commit message is read from stdin until Ctrl+D.
    """
    Ensure.in_repository(ctx)
    branch = check_branch(ctx)
    run_squash(ctx, branch=branch, message=message, assume_yes=assume_yes)
