import click

from devscripts.cli.branch_check import check_branch
from devscripts.cli.ensure import Ensure
from devscripts.cli.render import render_events
from devscripts.core.context import DevScriptsContext
from devscripts.operations.sync import execute_sync
from devscripts.operations.types import SyncError
from devscripts.output import print_error, user_output


def run_sync(ctx: DevScriptsContext) -> None:
    """Run the sync operation, exiting with code 1 on any error.

    Callers are responsible for the branch check.
    """
    Ensure.in_repository(ctx)
    result = render_events(execute_sync(ctx))
    if not isinstance(result, SyncError):
        return

    print_error(result.message)
    if result.error == "rebase_conflict":
        user_output("Conflicted files:")
        for path in result.conflict_files:
            user_output(f"    {path}")
        user_output(
            "Resolve the conflicts and run 'git rebase --continue', "
            "or run 'git rebase --abort' to return to where you started."
        )
    raise SystemExit(1)


@click.command("sync")
@click.pass_obj
def sync_cmd(ctx: DevScriptsContext) -> None:
    """Sync with upstream main branch.

    Fetches the trunk from the remote and rebases the current branch onto it.
    Refuses to run with uncommitted changes.
    """
    Ensure.in_repository(ctx)
    check_branch(ctx)
    run_sync(ctx)
