"""Locations that can be dereferenced into metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

DEFAULT_RESOLVER_URL = "https://doi.org"

_DOI_PREFIXES = (
    "https://doi.org/",
    "http://doi.org/",
    "https://dx.doi.org/",
    "http://dx.doi.org/",
    "doi:",
)


class Location(Protocol):
    """Anything that knows the URL its metadata lives at."""

    def url(self) -> str:
        """Return the URL to request metadata from."""
        raise NotImplementedError


def normalize_doi(doi: str) -> str:
    """Strip surrounding whitespace and common URL/scheme prefixes from a DOI."""
    value = doi.strip()
    lowered = value.lower()
    for prefix in _DOI_PREFIXES:
        if lowered.startswith(prefix):
            return value[len(prefix) :].strip()
    return value


@dataclass(frozen=True, slots=True)
class DoiLocation:
    """A DOI dereferenced through a DOI resolver.

    Attributes:
        doi: Bare DOI, e.g. ``10.5281/zenodo.6719627``.
        resolver_url: Base URL of the resolver.
    """

    doi: str
    resolver_url: str = DEFAULT_RESOLVER_URL

    def __post_init__(self) -> None:
        doi = normalize_doi(self.doi)
        if not doi:
            raise ValueError("DOI must not be empty")
        object.__setattr__(self, "doi", doi)

    def url(self) -> str:
        return f"{self.resolver_url.rstrip('/')}/{self.doi}"
