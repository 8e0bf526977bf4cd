import click

from devscripts.cli.branch_check import check_branch
from devscripts.cli.commands.squash_cmd import run_squash
from devscripts.cli.commands.sync_cmd import run_sync
from devscripts.cli.ensure import Ensure
from devscripts.cli.render import render_events
from devscripts.core.context import DevScriptsContext
from devscripts.operations.push import execute_push
from devscripts.operations.types import PushFailed
from devscripts.output import print_error, print_status, user_confirm


@click.command("prepare_pr")
@click.option("-m", "--message", default=None, help="Commit message for the squashed commit")
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Answer yes to every prompt")
@click.option("--web", is_flag=True, help="Open the pull request compare page in a browser")
@click.pass_obj
def prepare_pr_cmd(
    ctx: DevScriptsContext, message: str | None, assume_yes: bool, web: bool
) -> None:
    """Complete workflow: sync, squash, push.

    \b
    Steps:
      1. Rebase onto the upstream trunk (see 'sync')
      2. Squash all commits into one (see 'squash')
      3. Force-push the branch and print the compare URL

    Stops after step 2 when there is nothing to squash.
    """
    Ensure.in_repository(ctx)
    branch = Ensure.not_none(
        check_branch(ctx), "Cannot prepare a pull request from a detached HEAD"
    )
    config = ctx.config
    print_status("Preparing for Pull Request...")

    print_status(f"Step 1: Syncing with {config.trunk}...")
    run_sync(ctx)

    print_status("Step 2: Squashing commits...")
    outcome = run_squash(ctx, branch=branch, message=message, assume_yes=assume_yes)
    if outcome == "nothing_to_squash":
        return

    print_status("Step 3: Pushing to remote...")
    if not assume_yes and not user_confirm(f"Push to {config.remote}?", default=False):
        return

    result = render_events(execute_push(ctx, branch=branch))
    if isinstance(result, PushFailed):
        print_error(result.message)
        raise SystemExit(1)

    if web and result.compare_url is not None:
        ctx.browser.launch(result.compare_url)
