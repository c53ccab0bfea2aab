"""Console text output renderers.

Renders a metadata record into human-friendly text.
"""

from __future__ import annotations

from typing import Any

from MetaResolver.core import models
from MetaResolver.core.models import ExtensiveMeta, MetadataRecord
from MetaResolver.renderers.base import OutputWriter
from MetaResolver.utils.log import log


def _fmt(value: Any) -> str:
    """Format a possibly missing field; missing values render as "-"."""
    if value is None:
        return "-"
    return str(value)


def render_text(record: MetadataRecord, *, identifier: str | None = None) -> str:
    """Render a record into a human-readable text block.

    Args:
        record: Metadata record of any variant.
        identifier: Optional identifier shown as the heading.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    if identifier:
        lines.append(identifier)
    completeness = models.completeness(record)
    if isinstance(record, ExtensiveMeta):
        completeness = f"{completeness} ({models.completeness(record.meta)})"
    lines.append(f"   Author: {_fmt(models.author(record))}")
    lines.append(f"   Year: {_fmt(models.year(record))}")
    lines.append(f"   Journal: {_fmt(models.journal(record))}")
    lines.append(f"   Completeness: {completeness}")
    if isinstance(record, ExtensiveMeta):
        lines.append(f"   Citation: {_fmt(record.citation)}")
        title = record.metadata.get("title")
        if isinstance(title, str) and title:
            lines.append(f"   Title: {title}")
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write records to console via logging."""

    def write_record(self, identifier: str, record: MetadataRecord) -> None:
        for line in render_text(record, identifier=identifier).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
