import logging

import click

from devscripts.cli.commands.help_cmd import help_cmd
from devscripts.cli.commands.lint_cmd import lint_cmd
from devscripts.cli.commands.prepare_pr_cmd import prepare_pr_cmd
from devscripts.cli.commands.setup_cmd import setup_cmd
from devscripts.cli.commands.squash_cmd import squash_cmd
from devscripts.cli.commands.sync_cmd import sync_cmd
from devscripts.cli.commands.test_cmd import test_coverage_cmd, test_cmd
from devscripts.cli.config import ConfigError
from devscripts.cli.ensure import UserFacingCliError
from devscripts.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Commands listed in workflow order rather than alphabetically
COMMAND_ORDER = (
    "setup",
    "test",
    "test_coverage",
    "lint",
    "sync",
    "squash",
    "prepare_pr",
    "help",
)


class DevScriptsGroup(click.Group):
    """Command group that falls back to help for unknown commands."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        known = [name for name in COMMAND_ORDER if name in self.commands]
        rest = sorted(name for name in self.commands if name not in COMMAND_ORDER)
        return known + rest

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            return "help", self.get_command(ctx, "help"), []
        return super().resolve_command(ctx, args)


@click.group(cls=DevScriptsGroup, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="devscripts")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print git and tool commands instead of running them")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """Development helper scripts for the contributor branch workflow."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    if ctx.invoked_subcommand == "help":
        return

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run)
        except ConfigError as e:
            raise UserFacingCliError(str(e)) from e


cli.add_command(setup_cmd)
cli.add_command(test_cmd)
cli.add_command(test_coverage_cmd)
cli.add_command(lint_cmd)
cli.add_command(sync_cmd)
cli.add_command(squash_cmd)
cli.add_command(prepare_pr_cmd)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `dev-scripts` console script."""
    cli()
