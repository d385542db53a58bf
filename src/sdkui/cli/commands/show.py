"""Show command implementation."""

import click

from sdkui.cli.core import load_candidates, terminal_width
from sdkui.cli.ensure import Ensure
from sdkui.cli.output import machine_output
from sdkui.core.candidates import fetch_candidate_versions, find_candidate
from sdkui.core.context import SdkuiContext
from sdkui.core.display_utils import format_candidate_block, format_version_listing
from sdkui.core.errors import SdkmanApiError


@click.command("show")
@click.argument("candidate_name")
@click.option("--no-versions", is_flag=True, help="Skip fetching the version listing.")
@click.pass_obj
def show_cmd(ctx: SdkuiContext, candidate_name: str, no_versions: bool) -> None:
    """Show one candidate and its available versions.

    CANDIDATE_NAME is the identifier used with `sdk install` (e.g. gradle)
    or the display name.
    """
    candidate = Ensure.not_none(
        find_candidate(load_candidates(ctx), candidate_name),
        f"Unknown candidate: {candidate_name}",
    )
    width = terminal_width()

    for line in format_candidate_block(candidate, width):
        machine_output(line)

    if no_versions:
        return

    try:
        candidate = fetch_candidate_versions(ctx, candidate)
    except SdkmanApiError as e:
        Ensure.fail(f"Could not fetch versions of {candidate.binary_name}: {e}")

    for line in format_version_listing(candidate, width):
        machine_output(line)
