"""CLI package for MetaResolver command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from MetaResolver.cli.runner import CommandRunner
from MetaResolver.cli.ui import cli


def main() -> None:
    """Run MetaResolver CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
