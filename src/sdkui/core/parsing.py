"""Parsers for the plain-text responses of the SDKMAN candidates API.

The API answers with listings formatted for a terminal pager rather than
JSON. Two layouts are handled here:

- The candidate catalog: records separated by a line of dashes, each with
  a header line (name, default version, homepage), free-text description
  and an install command line.
- Version listings: a whitespace-separated grid for most candidates and a
  "|"-separated table for Java.

All functions are pure and never raise on malformed input; missing parts
are left empty so callers (and validate_listing) can report them.
"""

import re
from dataclasses import dataclass

from sdkui.core.models import CandidateVersion, JavaVersion, RemoteCandidate, parse_version

URI_REGEX = re.compile(r"(http|https)://(\w+:?\w*@)?(\S+)(:[0-9]+)?(/|/([\w#!:.?+=&%@!-/]))?")
VERSION_REGEX = re.compile(r"\([-\w+\d+\.! ]+\)")
SEPARATOR_REGEX = re.compile(r"-{31,}")

INSTALL_MARKER = "$ sdk install"
UNKNOWN_VERSION = "unknown"
JAVA_LISTING_MARKER = "Available Java Versions"

# Leading lines of the version listings: banner, title, banner (+ table header for Java)
GENERIC_HEADER_LINES = 3
JAVA_HEADER_LINES = 5

CURRENT_MARKER = ">"
INSTALLED_MARKER = "*"
LOCAL_ONLY_MARKER = "+"


def split_listing(text: str) -> list[str]:
    """Split a catalog listing into record blocks.

    The first run of dashes found in the text is the separator; everything
    before it (banner and pager key hints) is discarded. Blank blocks are
    dropped. Text without any separator is returned as a single block.
    """
    match = SEPARATOR_REGEX.search(text)
    if match is None:
        return [text] if text.strip() else []

    separator = match.group(0)
    body = text[match.end() :]
    return [block for block in body.split(separator) if block.strip()]


def parse_candidate(block: str) -> RemoteCandidate:
    """Parse one record block of the candidate catalog.

    Example block:

        Gradle (8.1.1)                                   https://gradle.org/

        Gradle is a build automation tool ...

                                                        $ sdk install gradle
    """
    name = ""
    binary_name = ""
    homepage = ""
    default_version = ""
    description_lines: list[str] = []

    for line in block.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        uri_match = URI_REGEX.search(line)
        if uri_match is not None and not homepage:
            homepage = uri_match.group(0)
            version_matches = list(VERSION_REGEX.finditer(line))
            if version_matches:
                last = version_matches[-1]
                default_version = last.group(0)[1:-1].strip()
                name = line[: last.start()].strip()
            else:
                default_version = UNKNOWN_VERSION
                name = line[: uri_match.start()].strip()
        elif INSTALL_MARKER in line:
            binary_name = stripped.split()[-1]
        else:
            description_lines.append(stripped)

    return RemoteCandidate(
        name=name,
        binary_name=binary_name,
        description=" ".join(description_lines),
        homepage=homepage,
        default_version=default_version,
    )


def parse_candidates(text: str) -> list[RemoteCandidate]:
    """Parse the full /candidates/list response."""
    return [parse_candidate(block) for block in split_listing(text)]


def natural_sort_key(value: str) -> tuple[tuple[int, int, str], ...]:
    """Sort key ordering digit runs numerically ("1.10" after "1.9")."""
    key = []
    for chunk in re.findall(r"\d+|\D+", value):
        if chunk.isdigit():
            key.append((0, int(chunk), ""))
        else:
            key.append((1, 0, chunk))
    return tuple(key)


def _listing_rows(text: str, header_lines: int) -> list[str]:
    rows = []
    for line in text.splitlines()[header_lines:]:
        if line.startswith("==="):
            break
        rows.append(line)
    return rows


def parse_available_versions(text: str) -> list[CandidateVersion]:
    """Parse a /versions/list response into candidate versions.

    Java listings keep the table order. Other listings are sorted newest
    first using natural ordering.
    """
    if JAVA_LISTING_MARKER in text:
        return parse_available_java_versions(text)

    tokens = " ".join(_listing_rows(text, GENERIC_HEADER_LINES)).split()

    versions: list[CandidateVersion] = []
    current = False
    installed = False
    for token in tokens:
        if token == CURRENT_MARKER:
            current = True
            continue
        if token in (INSTALLED_MARKER, LOCAL_ONLY_MARKER):
            installed = True
            continue
        versions.append(CandidateVersion.local(parse_version(token), installed, current))
        current = False
        installed = False

    return sorted(versions, key=lambda v: natural_sort_key(v.identifier), reverse=True)


def parse_available_java_versions(text: str) -> list[CandidateVersion]:
    """Parse the Java table; rows without columns are kept as plain versions."""
    versions: list[CandidateVersion] = []
    for line in _listing_rows(text, JAVA_HEADER_LINES):
        if not line.strip():
            continue
        version = parse_version(line)
        if not isinstance(version, JavaVersion):
            versions.append(CandidateVersion.remote(version))
            continue
        versions.append(
            CandidateVersion.local(
                version,
                installed=version.status in ("installed", "local only"),
                current=">>>" in version.usage,
            )
        )
    return versions


@dataclass(frozen=True)
class ListingProblem:
    """A well-formedness problem found in a catalog listing.

    record_index is 1-based; 0 refers to the listing as a whole.
    """

    record_index: int
    record_name: str
    message: str

    def describe(self) -> str:
        if self.record_index == 0:
            return self.message
        label = f"record {self.record_index}"
        if self.record_name:
            label += f" ({self.record_name})"
        return f"{label}: {self.message}"


def validate_listing(text: str) -> list[ListingProblem]:
    """Check that every record has a name, a homepage URL and an install command."""
    blocks = split_listing(text)
    if not blocks:
        return [ListingProblem(record_index=0, record_name="", message="listing has no records")]

    problems: list[ListingProblem] = []
    for index, block in enumerate(blocks, start=1):
        candidate = parse_candidate(block)
        checks = [
            (candidate.name, "missing name"),
            (candidate.homepage, "missing homepage URL"),
            (candidate.binary_name, "missing install command"),
        ]
        for value, message in checks:
            if not value:
                problems.append(
                    ListingProblem(record_index=index, record_name=candidate.name, message=message)
                )
    return problems
