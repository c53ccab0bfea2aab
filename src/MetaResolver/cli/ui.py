"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from MetaResolver.cli.runner import CommandRunner
from MetaResolver.config import AppConfig, load_config


@click.group(help="MetaResolver: resolve DOIs into bibliographic metadata.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    A missing config file falls back to built-in defaults.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    ctx.obj = load_config(config_path) if config_path.exists() else AppConfig()


@cli.command("resolve")
@click.argument("doi")
@click.pass_context
def resolve_cmd(ctx: click.Context, doi: str) -> None:
    """Resolve DOI into author, year, journal and citation.

    Raises:
        click.Abort: When the resolution fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_resolve(action=ctx.command.name, doi=doi)


@cli.command("cite")
@click.argument("doi")
@click.option("--style", default=None, help="Citation style name, e.g. apa or harvard-cite-them-right.")
@click.pass_context
def cite_cmd(ctx: click.Context, doi: str, style: str | None) -> None:
    """Print a formatted citation for DOI.

    Raises:
        click.Abort: When the citation cannot be fetched.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_cite(action=ctx.command.name, doi=doi, style=style)
