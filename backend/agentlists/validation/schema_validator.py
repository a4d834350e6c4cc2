"""
Schema validation — required columns, all-or-nothing.

A batch either passes as a whole or is rejected as a whole: one record
missing a required column (or holding an empty value for it) rejects
every record in the file.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from agentlists.core.constants import REQUIRED_FIELD_LABELS, REQUIRED_FIELDS
from agentlists.pipeline.errors import SchemaError

# Offending row indexes reported back to the operator
MAX_REPORTED_ROWS = 20


def _is_missing(value: Any) -> bool:
    # Whitespace-only text would be saved as ""
    if isinstance(value, str):
        return not value.strip()
    return not value


def missing_fields(record: dict[str, Any], required: Sequence[str] = REQUIRED_FIELDS) -> list[str]:
    """Required keys that are absent, falsy or blank in one normalized record."""
    return [name for name in required if _is_missing(record.get(name))]


def required_columns_message(required: Sequence[str] = REQUIRED_FIELDS) -> str:
    labels = ", ".join(REQUIRED_FIELD_LABELS.get(name, name) for name in required)
    return f"Invalid file format. Required columns: {labels}"


def validate_records(
    records: Sequence[dict[str, Any]],
    required: Sequence[str] = REQUIRED_FIELDS,
) -> list[dict[str, Any]]:
    """
    Validate every normalized record; return them unchanged when all pass.

    An empty batch passes.

    Raises:
        SchemaError: naming the required columns missing from at least
            one record, plus the offending row indexes.
    """
    missing: set[str] = set()
    bad_rows: list[int] = []

    for idx, record in enumerate(records):
        absent = missing_fields(record, required)
        if absent:
            missing.update(absent)
            if len(bad_rows) < MAX_REPORTED_ROWS:
                bad_rows.append(idx)

    if missing:
        raise SchemaError(
            required_columns_message(required),
            missing=[name for name in required if name in missing],
            required=list(required),
            row_indexes=bad_rows,
        )

    return list(records)
