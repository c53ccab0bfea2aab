"""Resolution service layer for MetaResolver.

Provides the metadata resolver and a factory wiring it to the HTTP transport.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from MetaResolver.services.resolve import MetadataResolver, Transport

if TYPE_CHECKING:
    from MetaResolver.config import AppConfig


def create_resolver(config: AppConfig) -> MetadataResolver:
    """Create a resolver backed by the DOI HTTP client.

    Args:
        config: Application configuration containing resolver settings.

    Returns:
        Configured MetadataResolver instance.
    """
    from MetaResolver.sources.doi.client import DoiApiClient

    mailto = os.getenv(config.resolver.mailto_env, "").strip()
    client = DoiApiClient(timeout=config.resolver.timeout, mailto=mailto)
    return MetadataResolver(transport=client, parallel=config.resolver.parallel)


__all__ = [
    "MetadataResolver",
    "Transport",
    "create_resolver",
]
