import click


@click.command(
    "help",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show this help message."""
    parent = ctx.parent if ctx.parent is not None else ctx
    click.echo(parent.get_help())
