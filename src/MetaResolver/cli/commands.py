"""Command implementations for MetaResolver CLI.

Encapsulates business logic for commands, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

import click

from MetaResolver.config import AppConfig
from MetaResolver.core.location import DoiLocation
from MetaResolver.renderers import OutputWriter
from MetaResolver.services.resolve import MetadataResolver
from MetaResolver.utils.log import log


@dataclass(slots=True)
class ResolveCommand:
    """Resolve one DOI into a metadata record and hand it to the writer."""

    config: AppConfig
    resolver: MetadataResolver
    output_writer: OutputWriter

    def execute(self, doi: str) -> None:
        location = DoiLocation(doi, resolver_url=self.config.resolver.base_url)
        log.debug("Resolving doi=%s url=%s", location.doi, location.url())
        record = self.resolver.resolve(location)
        log.debug("Metadata keys: %s", sorted(record.metadata))
        self.output_writer.write_record(location.doi, record)


@dataclass(slots=True)
class CiteCommand:
    """Fetch formatted citation text for one DOI and echo it verbatim."""

    config: AppConfig
    resolver: MetadataResolver

    def execute(self, doi: str, style: str | None = None) -> str:
        location = DoiLocation(doi, resolver_url=self.config.resolver.base_url)
        text = self.resolver.fetch_citation(location, style or self.config.resolver.citation_style)
        click.echo(text.rstrip("\n"))
        return text
