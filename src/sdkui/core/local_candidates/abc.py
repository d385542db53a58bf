"""Abstract base class for local candidate discovery."""

from abc import ABC, abstractmethod

from sdkui.core.models import LocalCandidate


class LocalCandidates(ABC):
    """Abstract interface for reading the local SDKMAN installation."""

    @abstractmethod
    def list_local_candidates(self) -> list[LocalCandidate]:
        """List installed candidates with their versions.

        Returns:
            Local candidates sorted by binary name, versions sorted by name

        Raises:
            CandidatesDirNotFound: If the candidates directory is not
                configured or does not exist
        """
        ...
