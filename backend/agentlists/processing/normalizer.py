"""
Record Normalizer — canonical (trimmed, lower-cased) field names.

Keys are folded left to right in the record's iteration order.  When two
raw keys collapse to the same canonical key ("Phone" and "phone "), the
later one wins.  Values are passed through untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

NormalizedRecord = dict[str, Any]


def canonical_key(key: Any) -> str:
    return str(key).strip().lower()


def normalize_record(raw: Mapping[Any, Any]) -> NormalizedRecord:
    """Re-key one raw record by canonical field name (last write wins)."""
    normalized: NormalizedRecord = {}
    for key, value in raw.items():
        normalized[canonical_key(key)] = value
    return normalized


def normalize_records(raws: Iterable[Mapping[Any, Any]]) -> list[NormalizedRecord]:
    return [normalize_record(raw) for raw in raws]
