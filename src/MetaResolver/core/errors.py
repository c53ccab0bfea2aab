"""Domain errors raised while resolving identifier metadata.

Every transport outcome is converted into one of these exceptions by the
status interpreter before a response body is used.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories for a single metadata request."""

    IDENTIFIER_NOT_FOUND = "identifier_not_found"
    NO_METADATA_AVAILABLE = "no_metadata_available"
    UNSUPPORTED_REPRESENTATION = "unsupported_representation"
    SERVICE_UNREACHABLE = "service_unreachable"
    MALFORMED_METADATA = "malformed_metadata"


class MetadataError(Exception):
    """Base class for metadata request failures.

    Attributes:
        kind: Failure category.
        status: HTTP status that produced the error, if any.
    """

    kind: ErrorKind = ErrorKind.SERVICE_UNREACHABLE
    default_message = "Metadata request failed."

    def __init__(self, message: str | None = None, *, status: int | None = None) -> None:
        super().__init__(message or self.default_message)
        self.status = status


class IdentifierNotFound(MetadataError):
    kind = ErrorKind.IDENTIFIER_NOT_FOUND
    default_message = "The requested identifier does not exist."


class NoMetadataAvailable(MetadataError):
    kind = ErrorKind.NO_METADATA_AVAILABLE
    default_message = "No metadata available for the requested identifier."


class UnsupportedRepresentation(MetadataError):
    kind = ErrorKind.UNSUPPORTED_REPRESENTATION
    default_message = "The service cannot produce the requested representation."


class ServiceUnreachable(MetadataError):
    kind = ErrorKind.SERVICE_UNREACHABLE
    default_message = "Cannot reach the identifier service. Is the network down?"


class MalformedMetadata(MetadataError):
    kind = ErrorKind.MALFORMED_METADATA
    default_message = "The metadata response is not valid JSON."


__all__ = [
    "ErrorKind",
    "MetadataError",
    "IdentifierNotFound",
    "NoMetadataAvailable",
    "UnsupportedRepresentation",
    "ServiceUnreachable",
    "MalformedMetadata",
]
