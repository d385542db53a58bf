import click

from sdkui import __version__
from sdkui.cli.commands.check import check_cmd
from sdkui.cli.commands.config import config_group
from sdkui.cli.commands.installed import installed_cmd
from sdkui.cli.commands.list_cmd import list_cmd
from sdkui.cli.commands.show import show_cmd
from sdkui.cli.debug import configure_logging
from sdkui.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, prog_name="sdkui")
@click.option("--debug", is_flag=True, help="Log API requests and local scanning to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Browse SDKMAN candidates and local installations."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
        ctx.call_on_close(ctx.obj.sdkman_api.close)


# Register all commands
cli.add_command(check_cmd)
cli.add_command(config_group)
cli.add_command(installed_cmd)
cli.add_command(list_cmd)
cli.add_command(show_cmd)


def main() -> None:
    """CLI entry point used by the `sdkui` console script."""
    cli()
