"""Production implementation of the SDKMAN candidates API using httpx."""

import logging

import httpx

from sdkui import __version__
from sdkui.core.errors import (
    BadRequestError,
    RequestFailedError,
    ServerError,
    UrlParsingError,
)
from sdkui.core.sdkman_api.abc import SdkmanApi

logger = logging.getLogger(__name__)

CANDIDATE_LIST_ENDPOINT = "/candidates/list"


def version_list_endpoint(binary_name: str, platform: str) -> str:
    return f"/candidates/{binary_name}/{platform}/versions/list"


def build_url(base_url: str, endpoint: str) -> httpx.URL:
    """Join base URL and endpoint, rejecting anything that is not http(s).

    Raises:
        UrlParsingError: If the resulting URL is invalid
    """
    complete_url = f"{base_url.rstrip('/')}{endpoint}"
    try:
        url = httpx.URL(complete_url)
    except httpx.InvalidURL:
        raise UrlParsingError(complete_url) from None
    if url.scheme not in ("http", "https") or not url.host:
        raise UrlParsingError(complete_url)
    return url


class RealSdkmanApi(SdkmanApi):
    """Production implementation issuing GET requests against the API.

    Args:
        base_url: API root, e.g. "https://api.sdkman.io/2"
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        # Created on first request so commands that never hit the API open no connections
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                headers={"User-Agent": f"sdkui/{__version__}"},
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch_candidate_list(self) -> str:
        url = build_url(self._base_url, CANDIDATE_LIST_ENDPOINT)
        return self._get_text(url, params=None)

    def fetch_version_list(
        self,
        binary_name: str,
        platform: str,
        *,
        current: str | None,
        installed: list[str],
    ) -> str:
        if not binary_name:
            raise BadRequestError("candidate binary name is empty")
        url = build_url(self._base_url, version_list_endpoint(binary_name, platform))
        params = {"current": current or "", "installed": ",".join(installed)}
        return self._get_text(url, params=params)

    def _get_text(self, url: httpx.URL, params: dict[str, str] | None) -> str:
        logger.debug("GET %s params=%s", url, params)
        # httpx raises for transport problems; wrap them with the request URL
        try:
            response = self.client.get(url, params=params)
        except httpx.HTTPError as e:
            raise RequestFailedError(str(url), str(e)) from e

        logger.debug(
            "Response %s from %s (%d bytes)", response.status_code, url, len(response.content)
        )
        if not response.is_success:
            raise ServerError(response.status_code)
        return response.text
