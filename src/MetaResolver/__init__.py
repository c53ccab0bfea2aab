"""MetaResolver: resolve DOIs into classified bibliographic metadata.

The public surface mirrors the resolution pipeline: build records with
``classify``, resolve identifiers with ``MetadataResolver.resolve`` and
read fields uniformly with ``author``, ``year``, ``journal``.
"""

from __future__ import annotations

from MetaResolver.core.errors import (
    ErrorKind,
    IdentifierNotFound,
    MalformedMetadata,
    MetadataError,
    NoMetadataAvailable,
    ServiceUnreachable,
    UnsupportedRepresentation,
)
from MetaResolver.core.location import DoiLocation, Location
from MetaResolver.core.models import (
    ExtensiveMeta,
    IncompleteMeta,
    MetadataRecord,
    MinimalMeta,
    author,
    citation,
    classify,
    journal,
    raw_metadata,
    year,
)
from MetaResolver.services.resolve import MetadataResolver

__all__ = [
    "ErrorKind",
    "MetadataError",
    "IdentifierNotFound",
    "NoMetadataAvailable",
    "UnsupportedRepresentation",
    "ServiceUnreachable",
    "MalformedMetadata",
    "Location",
    "DoiLocation",
    "MinimalMeta",
    "IncompleteMeta",
    "ExtensiveMeta",
    "MetadataRecord",
    "classify",
    "author",
    "year",
    "journal",
    "citation",
    "raw_metadata",
    "MetadataResolver",
]
