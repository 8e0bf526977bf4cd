import click

from devscripts.cli.render import render_events
from devscripts.core.context import DevScriptsContext
from devscripts.operations.setup import execute_setup
from devscripts.operations.types import SetupError
from devscripts.output import print_error


@click.command("setup")
@click.pass_obj
def setup_cmd(ctx: DevScriptsContext) -> None:
    """Setup development environment.

    Installs the project in editable mode with its dev extras, installs the
    pre-commit hooks and creates the env file from its example if missing.
    """
    result = render_events(execute_setup(ctx))
    if isinstance(result, SetupError):
        print_error(result.message)
        raise SystemExit(result.exit_code)
