"""Excel 2007+ (.xlsx) extractor, first worksheet only."""

from __future__ import annotations

import io
from typing import Any

from openpyxl import load_workbook

from agentlists.core.constants import FileFormat
from agentlists.core.logging import get_logger
from agentlists.pipeline.errors import MalformedInputError
from agentlists.processing.extractors.base import BaseExtractor, rows_to_records

logger = get_logger(__name__)


class OpenpyxlSheetAdapter:
    """Row-wise view over an openpyxl worksheet."""

    def __init__(self, ws) -> None:
        self._ws = ws
        self.title = ws.title

    def rows(self):
        for row in self._ws.iter_rows(values_only=True):
            yield list(row)


class XlsxExtractor(BaseExtractor):
    format_type = FileFormat.XLSX

    def extract(self, content: bytes) -> list[dict[str, Any]]:
        try:
            workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        except Exception as exc:
            raise MalformedInputError(
                f"Excel workbook could not be opened: {exc}",
                details={"format": self.format_type},
            ) from exc

        try:
            if not workbook.worksheets:
                return []
            sheet = OpenpyxlSheetAdapter(workbook.worksheets[0])
            logger.debug("Reading first worksheet", sheet=sheet.title, sheets=len(workbook.worksheets))
            return rows_to_records(sheet.rows(), skip_empty_cells=True)
        except Exception as exc:
            raise MalformedInputError(
                f"Excel worksheet could not be read: {exc}",
                details={"format": self.format_type},
            ) from exc
        finally:
            workbook.close()
