"""HTTP transport for DOI content negotiation.

See https://citation.crosscite.org/docs.html for the supported media types.
"""

from __future__ import annotations

from dataclasses import dataclass

import requests

from MetaResolver.core.errors import ServiceUnreachable
from MetaResolver.utils.log import log

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "meta-resolver/0.1"


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Status and body of one HTTP exchange; no other headers are kept."""

    status: int
    body: bytes


class DoiApiClient:
    """Low-level HTTP client that issues one GET per ``Accept`` media type.

    Non-2xx responses are returned as-is; mapping statuses to errors is left
    to the caller. Transport failures raise ``ServiceUnreachable``.
    """

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT, mailto: str = "") -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            timeout: Request timeout in seconds.
            mailto: Optional contact email advertised in the User-Agent.
        """
        self.timeout = timeout
        self.user_agent = f"{USER_AGENT} (mailto:{mailto})" if mailto else USER_AGENT
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session.
        """
        self._session.close()

    def __enter__(self) -> DoiApiClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and close session."""
        self.close()

    def get(self, url: str, *, accept: str) -> RawResponse:
        """Issue a GET with exactly one ``Accept`` header.

        Args:
            url: Target URL.
            accept: Media type to negotiate.

        Returns:
            Status code and raw body.

        Raises:
            ServiceUnreachable: When the request cannot be completed.
        """
        headers = {"Accept": accept, "User-Agent": self.user_agent}
        try:
            response = self._session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as error:
            log.debug("DOI request failed url=%s accept=%s error=%s", url, accept, error)
            raise ServiceUnreachable(f"Cannot reach {url}: {error}") from error
        log.debug("DOI request url=%s accept=%s status=%d", url, accept, response.status_code)
        return RawResponse(status=response.status_code, body=response.content)
