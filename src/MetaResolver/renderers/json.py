"""JSON output renderers.

Renders metadata records into JSON-serializable objects and provides
JsonFileWriter for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from MetaResolver.core import models
from MetaResolver.core.models import MetadataRecord
from MetaResolver.renderers.base import OutputWriter
from MetaResolver.utils.log import log


def render_json(record: MetadataRecord) -> dict[str, Any]:
    """Render a record into a JSON-serializable dict.

    Missing fields are emitted as ``null``. The raw CSL-JSON is included
    under ``metadata`` for resolved records.
    """
    out: dict[str, Any] = {
        "completeness": models.completeness(record),
        "author": models.author(record),
        "year": models.year(record),
        "journal": models.journal(record),
    }
    if isinstance(record, models.ExtensiveMeta):
        out["inner"] = models.completeness(record.meta)
        out["citation"] = record.citation
        out["metadata"] = models.thaw_json(record.metadata)
    return out


class JsonFileWriter(OutputWriter):
    """Accumulate records and write them to a JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []

    def write_record(self, identifier: str, record: MetadataRecord) -> None:
        self.all_results.append({"identifier": identifier, "record": render_json(record)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to a JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
