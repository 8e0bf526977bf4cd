import click

from devscripts.cli.render import render_events
from devscripts.core.context import DevScriptsContext
from devscripts.operations.checks import execute_lint
from devscripts.operations.types import ToolRunError
from devscripts.output import print_error


@click.command("lint")
@click.pass_obj
def lint_cmd(ctx: DevScriptsContext) -> None:
    """Run linter and code formatter."""
    result = render_events(execute_lint(ctx))
    if isinstance(result, ToolRunError):
        print_error(result.message)
        raise SystemExit(result.exit_code)
