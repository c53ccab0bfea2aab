"""Map HTTP status codes of the identifier service to domain errors."""

from __future__ import annotations

from MetaResolver.core.errors import (
    IdentifierNotFound,
    MetadataError,
    NoMetadataAvailable,
    ServiceUnreachable,
    UnsupportedRepresentation,
)

_STATUS_ERRORS: dict[int, type[MetadataError]] = {
    404: IdentifierNotFound,
    204: NoMetadataAvailable,
    406: UnsupportedRepresentation,
}


def interpret_status(status: int) -> None:
    """Check a response status before its body is used.

    Args:
        status: HTTP status code.

    Raises:
        IdentifierNotFound: For 404.
        NoMetadataAvailable: For 204.
        UnsupportedRepresentation: For 406.
        ServiceUnreachable: For any other status except 200.
    """
    if status == 200:
        return
    error_cls = _STATUS_ERRORS.get(status, ServiceUnreachable)
    raise error_cls(status=status)
