"""Base classes for output writers.

Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from MetaResolver.core.models import MetadataRecord


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_record(self, identifier: str, record: MetadataRecord) -> None:
        """Write one resolved record.

        Args:
            identifier: Identifier the record was resolved from.
            record: Metadata record to display.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'resolve').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_record(self, identifier: str, record: MetadataRecord) -> None:
        """Send the record to all writers."""
        for writer in self.writers:
            writer.write_record(identifier, record)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
