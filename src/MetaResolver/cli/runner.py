"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

import click

from MetaResolver.cli.commands import CiteCommand, ResolveCommand
from MetaResolver.config import AppConfig
from MetaResolver.renderers import create_output_writer
from MetaResolver.services import create_resolver
from MetaResolver.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management.

    Handles logging configuration, component creation, and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_resolve(self, action: str, doi: str) -> None:
        """Resolve one DOI and write the record.

        Args:
            action: The CLI command name (e.g., 'resolve').
            doi: Identifier to resolve.

        Raises:
            click.Abort: When the resolution fails.
        """
        self._configure_logging(action)
        resolver = None
        try:
            resolver = create_resolver(self.config)
            output_writer = create_output_writer(self.config)
            command = ResolveCommand(config=self.config, resolver=resolver, output_writer=output_writer)
            command.execute(doi)
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Resolve failed: %s", e)
            raise click.Abort from e
        finally:
            if resolver is not None:
                resolver.close()

    def run_cite(self, action: str, doi: str, style: str | None) -> None:
        """Fetch and print a formatted citation.

        Raises:
            click.Abort: When the citation cannot be fetched.
        """
        self._configure_logging(action)
        resolver = None
        try:
            resolver = create_resolver(self.config)
            CiteCommand(config=self.config, resolver=resolver).execute(doi, style)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Cite failed: %s", e)
            raise click.Abort from e
        finally:
            if resolver is not None:
                resolver.close()

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
