"""Comma-separated text extractor."""

from __future__ import annotations

import csv
import io
from typing import Any

from agentlists.core.constants import FileFormat
from agentlists.pipeline.errors import MalformedInputError
from agentlists.processing.extractors.base import BaseExtractor, rows_to_records


class CsvExtractor(BaseExtractor):
    """UTF-8 CSV; the first row is the header, cell values stay strings."""

    format_type = FileFormat.CSV

    def extract(self, content: bytes) -> list[dict[str, Any]]:
        try:
            # utf-8-sig drops the BOM spreadsheet apps put in front of exports
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(
                f"CSV file is not valid UTF-8: {exc.reason} at byte {exc.start}",
                details={"format": self.format_type},
            ) from exc

        try:
            rows = list(csv.reader(io.StringIO(text, newline=""), strict=True))
        except csv.Error as exc:
            raise MalformedInputError(
                f"CSV file could not be parsed: {exc}",
                details={"format": self.format_type},
            ) from exc

        return rows_to_records(rows, skip_empty_cells=False)
