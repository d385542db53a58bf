"""Display formatting utilities for sdkui.

This module contains pure logic for laying out candidate records and
version listings in the terminal. All functions are pure (no I/O) and can
be tested without network or filesystem access.
"""

import re

import click

from sdkui.core.models import CandidateVersion, JavaVersion, RemoteCandidate

DEFAULT_WIDTH = 80
VERSION_COLUMNS = 4

PAGER_KEY_HINTS = (
    ("q-quit", "/-search down"),
    ("j-down", "?-search up"),
    ("k-up", "h-help"),
)

VERSION_LEGEND = (
    "* - installed",
    "> - currently in use",
)

JAVA_TABLE_HEADER = JavaVersion(
    vendor="Vendor",
    usage="Use",
    version="Version",
    distribution="Dist",
    status="Status",
    identifier="Identifier",
)


def get_visible_length(text: str) -> int:
    """Calculate the visible length of text, excluding ANSI and OSC escape sequences."""
    # Remove ANSI color codes (\033[...m)
    text = re.sub(r"\033\[[0-9;]*m", "", text)
    # Remove OSC 8 hyperlink sequences (\033]8;;URL\033\\)
    text = re.sub(r"\033\]8;;[^\033]*\033\\", "", text)
    return len(text)


def justify(left: str, right: str, width: int) -> str:
    """Place left and right on one line, separated by at least one space."""
    gap = width - get_visible_length(left) - get_visible_length(right)
    return left + " " * max(gap, 1) + right


def align_right(text: str, width: int) -> str:
    padding = width - get_visible_length(text)
    return " " * max(padding, 0) + text


def banner(title: str, width: int) -> list[str]:
    rule = "=" * width
    return [rule, title, rule]


def format_listing_header(api_base_url: str, width: int = DEFAULT_WIDTH) -> list[str]:
    """Banner, API source and pager key hints shown above the catalog.

    Everything here precedes the first separator, so parsing a saved
    listing never mistakes it for a record.
    """
    lines = banner(click.style("Available Candidates", bold=True), width)
    lines.append(click.style(f"API source: {api_base_url}", dim=True))
    lines.append("")
    half = width // 2
    for left, right in PAGER_KEY_HINTS:
        lines.append(f"{left:<{half}}{right}")
    lines.append("")
    return lines


def format_installed_summary(candidate: RemoteCandidate) -> str | None:
    """Format the locally installed versions, marking the current one.

    Returns:
        Styled text like "Installed: 7.6, > 8.1.1" or None when not installed
    """
    if not candidate.is_installed:
        return None
    names = [
        f"> {name}" if name == candidate.current_version else name
        for name in candidate.installed_versions
    ]
    return click.style(f"Installed: {', '.join(names)}", fg="green")


def format_candidate_block(candidate: RemoteCandidate, width: int = DEFAULT_WIDTH) -> list[str]:
    """Format a catalog record.

    Layout:
        Name (default version)                              homepage

        Description wrapped to the given width.

                                                $ sdk install binary
        ------------------------------------------------------------
    """
    title = click.style(f"{candidate.name} ({candidate.default_version})", bold=True)
    homepage = click.style(candidate.homepage, fg="cyan")
    lines = [justify(title, homepage, width), ""]

    if candidate.description:
        lines.extend(click.wrap_text(candidate.description, width=width).splitlines())
        lines.append("")

    installed = format_installed_summary(candidate)
    if installed is not None:
        lines.append(installed)

    lines.append(align_right(click.style(candidate.install_command, fg="yellow"), width))
    lines.append("-" * width)
    return lines


def format_candidate_listing(
    candidates: list[RemoteCandidate],
    api_base_url: str,
    width: int = DEFAULT_WIDTH,
) -> str:
    """Format the whole catalog: header, then one block per candidate.

    The output parses back with parse_candidates and passes validate_listing.
    """
    lines = format_listing_header(api_base_url, width)
    lines.append("-" * width)
    for candidate in candidates:
        lines.extend(format_candidate_block(candidate, width))
    return "\n".join(lines)


def format_version_grid(
    versions: list[CandidateVersion], columns: int = VERSION_COLUMNS
) -> list[str]:
    """Lay out plain versions row by row, `columns` per row."""
    rendered = [f"{v.render():<20}" for v in versions]
    return [
        "".join(rendered[i : i + columns]).rstrip() for i in range(0, len(rendered), columns)
    ]


def format_version_listing(candidate: RemoteCandidate, width: int = DEFAULT_WIDTH) -> list[str]:
    """Format the available versions of a candidate with a legend."""
    lines = banner(f"Available {candidate.name} Versions", width)
    if not candidate.versions:
        lines.append("No versions available")
        lines.append("=" * width)
        return lines

    if isinstance(candidate.versions[0].version, JavaVersion):
        lines.append(JAVA_TABLE_HEADER.render().rstrip())
        lines.append("-" * width)
        lines.extend(v.render().rstrip() for v in candidate.versions)
    else:
        lines.extend(format_version_grid(list(candidate.versions)))

    lines.append("=" * width)
    lines.extend(VERSION_LEGEND)
    lines.append("=" * width)
    return lines
