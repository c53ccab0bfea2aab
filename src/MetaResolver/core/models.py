"""Bibliographic metadata records.

A record is one of three completeness variants:

- ``MinimalMeta``: author, year and journal are all known.
- ``IncompleteMeta``: at least one of the three is missing (``None``).
- ``ExtensiveMeta``: a resolved record wrapping one of the above together
  with the formatted citation text and the raw CSL-JSON returned by the
  identifier service.

Use the module-level accessors (``author``, ``year``, ``journal``) to read
fields without branching on the variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True, slots=True)
class MinimalMeta:
    """The most important metadata, fully populated.

    Attributes:
        author: Flattened author display string.
        year: Publication year.
        journal: Journal or container title.
    """

    author: str
    year: int
    journal: str

    def __post_init__(self) -> None:
        if self.author is None or self.year is None or self.journal is None:
            raise ValueError("MinimalMeta requires author, year and journal")


@dataclass(frozen=True, slots=True)
class IncompleteMeta:
    """Metadata where at least one of the important fields is missing.

    Missing fields are ``None``; they are never coerced to ``""`` or ``0``.
    """

    author: Optional[str] = None
    year: Optional[int] = None
    journal: Optional[str] = None

    def __post_init__(self) -> None:
        if self.author is not None and self.year is not None and self.journal is not None:
            raise ValueError("IncompleteMeta requires at least one missing field; use MinimalMeta")


@dataclass(frozen=True, slots=True)
class ExtensiveMeta:
    """Metadata gathered from the identifier service.

    Attributes:
        meta: Classified inner record.
        citation: Formatted citation text, or None when the citation
            service failed or was not asked.
        metadata: Raw CSL-JSON mapping as returned by the service.
    """

    meta: Union[MinimalMeta, IncompleteMeta]
    citation: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.meta, (MinimalMeta, IncompleteMeta)):
            raise TypeError("ExtensiveMeta.meta must be MinimalMeta or IncompleteMeta")
        object.__setattr__(self, "metadata", freeze_json(self.metadata))

    @property
    def author(self) -> Optional[str]:
        return self.meta.author

    @property
    def year(self) -> Optional[int]:
        return self.meta.year

    @property
    def journal(self) -> Optional[str]:
        return self.meta.journal


MetadataRecord = Union[MinimalMeta, IncompleteMeta, ExtensiveMeta]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def freeze_json(value: Any) -> Any:
    """Return a read-only copy of a JSON tree.

    Mappings become ``MappingProxyType`` and lists become tuples, at every
    depth. Scalars are returned unchanged.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_json(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_json(item) for item in value)
    return value


def thaw_json(value: Any) -> Any:
    """Return a plain dict/list copy of a tree built by ``freeze_json``."""
    if isinstance(value, Mapping):
        return {key: thaw_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw_json(item) for item in value]
    return value


def classify(
    author: Optional[str],
    year: Optional[int],
    journal: Optional[str],
) -> Union[MinimalMeta, IncompleteMeta]:
    """Build the narrowest record that fits the given fields.

    Args:
        author: Author display string or None.
        year: Publication year or None.
        journal: Journal title or None.

    Returns:
        ``MinimalMeta`` when all three values are present, otherwise
        ``IncompleteMeta`` keeping the present values.
    """
    if author is None or year is None or journal is None:
        return IncompleteMeta(author=author, year=year, journal=journal)
    return MinimalMeta(author=author, year=year, journal=journal)


def _inner(record: MetadataRecord) -> Union[MinimalMeta, IncompleteMeta]:
    if isinstance(record, ExtensiveMeta):
        return record.meta
    if isinstance(record, (MinimalMeta, IncompleteMeta)):
        return record
    raise TypeError(f"Unsupported metadata record: {type(record).__name__}")


def author(record: MetadataRecord) -> Optional[str]:
    """Return the author string of any record variant."""
    return _inner(record).author


def year(record: MetadataRecord) -> Optional[int]:
    """Return the publication year of any record variant."""
    return _inner(record).year


def journal(record: MetadataRecord) -> Optional[str]:
    """Return the journal title of any record variant."""
    return _inner(record).journal


def citation(record: MetadataRecord) -> Optional[str]:
    """Return citation text; only resolved records carry one."""
    _inner(record)
    if isinstance(record, ExtensiveMeta):
        return record.citation
    return None


def raw_metadata(record: MetadataRecord) -> Mapping[str, Any]:
    """Return the raw CSL-JSON of a resolved record, empty for the others."""
    _inner(record)
    if isinstance(record, ExtensiveMeta):
        return record.metadata
    return _EMPTY


def completeness(record: MetadataRecord) -> str:
    """Return the variant name: ``minimal``, ``incomplete`` or ``extensive``."""
    if isinstance(record, ExtensiveMeta):
        return "extensive"
    if isinstance(record, MinimalMeta):
        return "minimal"
    if isinstance(record, IncompleteMeta):
        return "incomplete"
    raise TypeError(f"Unsupported metadata record: {type(record).__name__}")


__all__ = [
    "MinimalMeta",
    "IncompleteMeta",
    "ExtensiveMeta",
    "MetadataRecord",
    "classify",
    "author",
    "year",
    "journal",
    "citation",
    "raw_metadata",
    "completeness",
    "freeze_json",
    "thaw_json",
]
