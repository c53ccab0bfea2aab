"""Identifier-driven metadata resolution.

Combines the JSON and citation requests into a single ``ExtensiveMeta``.
The JSON response is mandatory; the citation text is best-effort.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Protocol

from MetaResolver.core.errors import MetadataError
from MetaResolver.core.location import Location
from MetaResolver.core.models import ExtensiveMeta, classify
from MetaResolver.sources.doi.client import RawResponse
from MetaResolver.sources.doi.parser import (
    extract_author,
    extract_journal,
    extract_year,
    parse_csl_json,
)
from MetaResolver.sources.doi.status import interpret_status
from MetaResolver.utils.log import log

CSL_JSON = "application/vnd.citationstyles.csl+json"
DEFAULT_STYLE = "apa"


def bibliography_media_type(style: str) -> str:
    """Return the ``Accept`` value requesting a formatted citation."""
    return f"text/x-bibliography; style={style}"


class Transport(Protocol):
    """HTTP transport able to GET a URL with one ``Accept`` header."""

    def get(self, url: str, *, accept: str) -> RawResponse:
        """Issue a GET request."""
        raise NotImplementedError

    def close(self) -> None:
        """Release transport resources."""
        raise NotImplementedError


@dataclass(slots=True)
class MetadataResolver:
    """Application service resolving locations into metadata records.

    Attributes:
        transport: HTTP transport.
        parallel: Issue the JSON and citation requests concurrently.
    """

    transport: Transport
    parallel: bool = False

    def fetch_json(self, location: Location) -> dict[str, Any]:
        """Fetch CSL-JSON for a location.

        Raises:
            MetadataError: On a non-200 status or an unparsable body.
        """
        response = self.transport.get(location.url(), accept=CSL_JSON)
        interpret_status(response.status)
        return parse_csl_json(response.body)

    def fetch_citation(self, location: Location, style: str) -> str:
        """Fetch a formatted citation; the text is returned verbatim.

        Raises:
            MetadataError: On a non-200 status.
        """
        response = self.transport.get(location.url(), accept=bibliography_media_type(style))
        interpret_status(response.status)
        return response.body.decode("utf-8", errors="replace")

    def fetch_apa(self, location: Location) -> str:
        """Fetch an APA citation."""
        return self.fetch_citation(location, DEFAULT_STYLE)

    def resolve(self, location: Location) -> ExtensiveMeta:
        """Resolve a location into an ``ExtensiveMeta``.

        Args:
            location: Where the metadata lives.

        Returns:
            Resolved record; ``citation`` is None if the citation request failed.

        Raises:
            MetadataError: If the JSON request fails.
        """
        if self.parallel:
            executor = ThreadPoolExecutor(max_workers=2)
            citation_future = executor.submit(self._try_fetch_apa, location)
            json_future = executor.submit(self.fetch_json, location)
            try:
                metadata = json_future.result()
            except BaseException:
                # an in-flight citation request must not delay the failure
                executor.shutdown(wait=False, cancel_futures=True)
                raise
            citation = citation_future.result()
            executor.shutdown(wait=True)
        else:
            metadata = self.fetch_json(location)
            citation = self._try_fetch_apa(location)

        meta = classify(extract_author(metadata), extract_year(metadata), extract_journal(metadata))
        log.debug("Resolved %s as %s", location.url(), type(meta).__name__)
        return ExtensiveMeta(meta=meta, citation=citation, metadata=metadata)

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def _try_fetch_apa(self, location: Location) -> str | None:
        """Fetch APA text, absorbing request failures."""
        try:
            return self.fetch_apa(location)
        except MetadataError as error:
            log.warning("Citation unavailable for %s: %s", location.url(), error)
            return None
