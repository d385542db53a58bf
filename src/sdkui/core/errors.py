"""Domain errors raised by the SDKMAN API client and the local scanner.

The CLI layer converts these into styled messages and exit code 1.
"""

from pathlib import Path


class SdkmanApiError(Exception):
    """Base class for failures talking to the SDKMAN candidates API."""


class UrlParsingError(SdkmanApiError):
    """The request URL could not be built from the configured base URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Url parsing failed: {url}")
        self.url = url


class RequestFailedError(SdkmanApiError):
    """The HTTP request did not complete (connection, timeout, decoding)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request failed: {url} ({reason})")
        self.url = url
        self.reason = reason


class ServerError(SdkmanApiError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server error: {status_code}")
        self.status_code = status_code


class BadRequestError(SdkmanApiError):
    """The caller asked for something the API cannot serve."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Bad request: {message}")


class CandidatesDirNotFound(Exception):
    """The local SDKMAN candidates directory is not configured or missing."""

    def __init__(self, path: Path | None) -> None:
        if path is None:
            message = "SDKMAN candidates directory is not configured (set SDKMAN_CANDIDATES_DIR)"
        else:
            message = f"SDKMAN candidates directory not found: {path}"
        super().__init__(message)
        self.path = path
