"""Output renderers for command results.

Provides writers for console and JSON output, and a factory function to
instantiate writers based on configuration.
"""

from __future__ import annotations

from MetaResolver.config import AppConfig
from MetaResolver.renderers.base import MultiOutputWriter, OutputWriter
from MetaResolver.renderers.console import ConsoleOutputWriter, render_text
from MetaResolver.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Appropriate OutputWriter instance for configured formats.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
