"""Filesystem implementation of local candidate discovery.

Layout of the SDKMAN candidates directory:

    candidates/
        gradle/
            8.1.1/
            7.6/
            current -> 8.1.1
        java/
            17.0.7-tem/
            current -> 17.0.7-tem
"""

import logging
from pathlib import Path

from sdkui.core.errors import CandidatesDirNotFound
from sdkui.core.local_candidates.abc import LocalCandidates
from sdkui.core.models import CandidateVersion, LocalCandidate, OtherVersion

logger = logging.getLogger(__name__)

CURRENT_LINK_NAME = "current"


class FilesystemLocalCandidates(LocalCandidates):
    """Reads candidates and versions from directories on disk."""

    def __init__(self, candidates_dir: Path | None) -> None:
        self._candidates_dir = candidates_dir

    @property
    def candidates_dir(self) -> Path | None:
        return self._candidates_dir

    def list_local_candidates(self) -> list[LocalCandidate]:
        if self._candidates_dir is None or not self._candidates_dir.is_dir():
            raise CandidatesDirNotFound(self._candidates_dir)

        logger.debug("Scanning candidates directory %s", self._candidates_dir)
        local_candidates = []
        for candidate_path in sorted(self._candidates_dir.iterdir()):
            if not candidate_path.is_dir():
                continue
            local_candidates.append(
                LocalCandidate(
                    binary_name=candidate_path.name,
                    versions=tuple(_read_versions(candidate_path)),
                )
            )
        return local_candidates


def _read_versions(candidate_path: Path) -> list[CandidateVersion]:
    current_target = _resolve_current(candidate_path)

    versions = []
    for version_path in sorted(candidate_path.iterdir()):
        if version_path.name == CURRENT_LINK_NAME or not version_path.is_dir():
            continue
        is_current = current_target is not None and version_path.resolve() == current_target
        version = OtherVersion(version_path.name)
        versions.append(CandidateVersion.local(version, installed=True, current=is_current))

    logger.debug(
        "Found %d versions of %s (current: %s)",
        len(versions),
        candidate_path.name,
        current_target.name if current_target else None,
    )
    return versions


def _resolve_current(candidate_path: Path) -> Path | None:
    """Return the version directory the "current" entry points at, if any."""
    current = candidate_path / CURRENT_LINK_NAME
    if not current.exists():
        return None
    return current.resolve()
