"""Candidate catalog operations combining the remote API and local state."""

import logging

from sdkui.core.context import SdkuiContext
from sdkui.core.errors import CandidatesDirNotFound
from sdkui.core.models import CandidateVersion, LocalCandidate, RemoteCandidate
from sdkui.core.parsing import parse_available_versions, parse_candidates

logger = logging.getLogger(__name__)


def list_local_candidates_or_empty(ctx: SdkuiContext) -> dict[str, LocalCandidate]:
    """Map binary name to local candidate; empty when SDKMAN is not installed."""
    try:
        local_candidates = ctx.local_candidates.list_local_candidates()
    except CandidatesDirNotFound as e:
        logger.debug("Skipping local candidates: %s", e)
        return {}
    return {local.binary_name: local for local in local_candidates}


def fetch_candidates(ctx: SdkuiContext) -> list[RemoteCandidate]:
    """Fetch the remote catalog and merge locally installed versions into it.

    Raises:
        SdkmanApiError: If the catalog cannot be fetched
    """
    candidates = parse_candidates(ctx.sdkman_api.fetch_candidate_list())
    logger.debug("Parsed %d candidates from catalog", len(candidates))

    local_by_name = list_local_candidates_or_empty(ctx)
    merged = []
    for candidate in candidates:
        local = local_by_name.get(candidate.binary_name)
        merged.append(candidate.with_local(local) if local is not None else candidate)
    return merged


def find_candidate(candidates: list[RemoteCandidate], key: str) -> RemoteCandidate | None:
    """Find a candidate by binary name, falling back to display name."""
    for candidate in candidates:
        if candidate.binary_name == key:
            return candidate
    lowered = key.lower()
    for candidate in candidates:
        if candidate.name.lower() == lowered:
            return candidate
    return None


def filter_candidates(candidates: list[RemoteCandidate], query: str) -> list[RemoteCandidate]:
    """Case-insensitive substring match on name, binary name and description."""
    needle = query.strip().lower()
    if not needle:
        return list(candidates)
    return [
        c
        for c in candidates
        if needle in c.name.lower()
        or needle in c.binary_name.lower()
        or needle in c.description.lower()
    ]


def fetch_candidate_versions(ctx: SdkuiContext, candidate: RemoteCandidate) -> RemoteCandidate:
    """Fetch available versions of a candidate, marking local installations.

    Raises:
        SdkmanApiError: If the version listing cannot be fetched
    """
    text = ctx.sdkman_api.fetch_version_list(
        candidate.binary_name,
        ctx.settings.platform,
        current=candidate.current_version,
        installed=list(candidate.installed_versions),
    )
    versions = parse_available_versions(text)
    logger.debug("Parsed %d versions of %s", len(versions), candidate.binary_name)

    installed = set(candidate.installed_versions)
    local_current = candidate.current_version
    marked = [
        CandidateVersion.local(
            v.version,
            installed=v.installed or v.identifier in installed,
            # At most one current version: the local symlink wins over the server's marker
            current=v.identifier == local_current if local_current is not None else v.current,
        )
        for v in versions
    ]
    return candidate.with_versions(marked)
