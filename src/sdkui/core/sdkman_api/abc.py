"""Abstract base class for SDKMAN candidates API access."""

from abc import ABC, abstractmethod


class SdkmanApi(ABC):
    """Abstract interface for the SDKMAN candidates API.

    Responses are returned as raw text; parsing lives in sdkui.core.parsing.
    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def fetch_candidate_list(self) -> str:
        """Fetch the candidate catalog listing.

        Returns:
            The /candidates/list response body

        Raises:
            SdkmanApiError: If the request cannot be made or the server fails
        """
        ...

    @abstractmethod
    def fetch_version_list(
        self,
        binary_name: str,
        platform: str,
        *,
        current: str | None,
        installed: list[str],
    ) -> str:
        """Fetch the version listing of one candidate.

        Args:
            binary_name: Candidate identifier (e.g. "gradle", "java")
            platform: SDKMAN platform identifier (e.g. "linuxx64")
            current: Locally selected version, marked in the listing
            installed: Locally installed versions, marked in the listing

        Returns:
            The /candidates/{binary}/{platform}/versions/list response body

        Raises:
            BadRequestError: If binary_name is empty
            SdkmanApiError: If the request cannot be made or the server fails
        """
        ...

    def close(self) -> None:
        """Release network resources held by the implementation.

        Default: nothing to release.
        """
        return None
