"""
Abstract base class for all tabular extractors.

An extractor turns the full uploaded byte buffer into an ordered list
of raw records (header string → cell value).  The first non-blank row
is the header; later rows are zipped against it by position, so
missing trailing cells become absent keys and cells past the header
width are dropped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any


class BaseExtractor(ABC):
    """Base interface for tabular extractors."""

    format_type: str = ""

    @abstractmethod
    def extract(self, content: bytes) -> list[dict[str, Any]]:
        """Extract raw records from the whole buffer.  Raises MalformedInputError."""
        ...

    def supports_format(self, format_type: str) -> bool:
        """Return True if this extractor handles the given format type."""
        return format_type == self.format_type


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _header_name(value: Any) -> str | None:
    """Header cell → column key.  Blank header cells drop their column."""
    if _is_blank(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rows_to_records(
    rows: Iterable[Sequence[Any]],
    *,
    skip_empty_cells: bool,
) -> list[dict[str, Any]]:
    """
    Map a row stream onto header-keyed records.

    Args:
        rows: Cell rows in sheet/file order.
        skip_empty_cells: Leave empty cells out of the record entirely
            (spreadsheet behaviour) instead of keeping them as "".
    """
    header: list[str | None] | None = None
    records: list[dict[str, Any]] = []

    for row in rows:
        if all(_is_blank(cell) for cell in row):
            continue

        if header is None:
            header = [_header_name(cell) for cell in row]
            continue

        record: dict[str, Any] = {}
        for name, value in zip(header, row):
            if name is None:
                continue
            if skip_empty_cells and (value is None or value == ""):
                continue
            record[name] = value
        records.append(record)

    return records
