"""Check command implementation."""

from typing import TextIO

import click

from sdkui.cli.output import machine_output, user_output
from sdkui.core.parsing import split_listing, validate_listing


@click.command("check")
@click.argument("listing", type=click.File("r"), default="-")
def check_cmd(listing: TextIO) -> None:
    """Check that a saved candidate listing is well formed.

    Every record must have a name, a homepage URL and an install command.
    Reads LISTING (default: stdin).
    """
    text = listing.read()
    problems = validate_listing(text)

    if not problems:
        machine_output(f"Listing is well formed ({len(split_listing(text))} records)")
        return

    for problem in problems:
        user_output(click.style("✗ ", fg="red") + problem.describe())
    user_output(f"{len(problems)} problem(s) found")
    raise SystemExit(1)
