"""List command implementation."""

import click

from sdkui.cli.core import load_candidates, terminal_width
from sdkui.cli.output import machine_output, user_output
from sdkui.core.candidates import filter_candidates
from sdkui.core.context import SdkuiContext
from sdkui.core.display_utils import format_candidate_listing


@click.command("list")
@click.option("--filter", "query", default="", help="Only show candidates matching TEXT.")
@click.option("--installed-only", is_flag=True, help="Only show locally installed candidates.")
@click.option("--no-pager", is_flag=True, help="Print directly instead of using a pager.")
@click.pass_obj
def list_cmd(ctx: SdkuiContext, query: str, installed_only: bool, no_pager: bool) -> None:
    """Browse available SDKMAN candidates.

    The listing opens in your pager: q quits, j/k scroll, / and ? search.
    """
    candidates = filter_candidates(load_candidates(ctx), query)
    if installed_only:
        candidates = [c for c in candidates if c.is_installed]

    if not candidates:
        if query:
            user_output(f"No candidates match '{query}'")
        else:
            user_output("No candidates found")
        return

    text = format_candidate_listing(candidates, ctx.settings.api_base_url, width=terminal_width())
    if no_pager or not ctx.settings.use_pager:
        machine_output(text)
    else:
        click.echo_via_pager(text)
