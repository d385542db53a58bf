"""Installed command implementation."""

import click
from rich.console import Console
from rich.table import Table

from sdkui.cli.core import ensure_valid_config
from sdkui.cli.ensure import Ensure
from sdkui.cli.output import user_output
from sdkui.core.context import SdkuiContext
from sdkui.core.errors import CandidatesDirNotFound


@click.command("installed")
@click.pass_obj
def installed_cmd(ctx: SdkuiContext) -> None:
    """List candidates installed in the local SDKMAN directory."""
    ensure_valid_config(ctx)
    try:
        local_candidates = ctx.local_candidates.list_local_candidates()
    except CandidatesDirNotFound as e:
        Ensure.fail(str(e))

    if not local_candidates:
        user_output("No local candidates found")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("candidate", style="cyan", no_wrap=True)
    table.add_column("current", style="green", no_wrap=True)
    table.add_column("versions")

    for local in local_candidates:
        current = local.current_version
        table.add_row(
            local.binary_name,
            current if current is not None else "[dim]-[/dim]",
            ", ".join(local.version_names()) or "[dim]none[/dim]",
        )

    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)
    console.print()  # Add blank line after table
