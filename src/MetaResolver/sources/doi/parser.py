"""CSL-JSON payload parser.

Field extractors are total: unexpected or missing data yields ``None``
instead of an exception.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from MetaResolver.core.errors import MalformedMetadata

AUTHOR_SEPARATOR = " & "


def parse_csl_json(body: bytes) -> dict[str, Any]:
    """Decode a response body into a string-keyed CSL-JSON tree.

    Args:
        body: Raw response body.

    Returns:
        The parsed top-level mapping.

    Raises:
        MalformedMetadata: If the body is not a JSON object.
    """
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as error:
        raise MalformedMetadata(f"Invalid CSL-JSON body: {error}") from error
    if not isinstance(data, dict):
        raise MalformedMetadata("CSL-JSON root must be an object")
    return data


def extract_year(item: Mapping[str, Any]) -> int | None:
    """Extract the publication year from ``issued.date-parts``.

    The last ``date-parts`` entry wins; its first element is the year.
    """
    issued = item.get("issued")
    if not isinstance(issued, Mapping):
        return None
    date_parts = issued.get("date-parts")
    if not isinstance(date_parts, (list, tuple)) or not date_parts:
        return None
    last = date_parts[-1]
    if not isinstance(last, (list, tuple)) or not last:
        return None
    return _as_year(last[0])


def extract_author(item: Mapping[str, Any]) -> str | None:
    """Extract a single display string for all authors."""
    if "author" not in item:
        return None
    return flatten_name(item["author"])


def extract_journal(item: Mapping[str, Any]) -> str | None:
    """Extract ``container-title``; string values are returned verbatim."""
    value = item.get("container-title")
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        # some registrars send container-title as a list of titles
        for entry in value:
            if isinstance(entry, str):
                return entry
    return None


def flatten_name(value: Any) -> str | None:
    """Collapse one author entry or a list of entries into a display string.

    Args:
        value: A CSL name mapping or a list of them.

    Returns:
        ``literal`` verbatim, ``"<family>, <given>"``, or ``family`` alone for
        a single entry; for a list, the usable names joined with ``" & "``.
        None when nothing usable is present.
    """
    if isinstance(value, (list, tuple)):
        names = [name for name in (_flatten_one(entry) for entry in value) if name is not None]
        if not names:
            return None
        return AUTHOR_SEPARATOR.join(names)
    return _flatten_one(value)


def _flatten_one(entry: Any) -> str | None:
    """Flatten a single CSL name mapping."""
    if not isinstance(entry, Mapping):
        return None
    literal = _str_or_none(entry.get("literal"))
    if literal is not None:
        return literal
    family = _str_or_none(entry.get("family"))
    given = _str_or_none(entry.get("given"))
    if family is not None and given is not None:
        return f"{family}, {given}"
    return family


def _as_year(value: Any) -> int | None:
    """Convert a date-part into an integer year."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _str_or_none(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    return None
