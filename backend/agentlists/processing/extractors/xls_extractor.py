"""Legacy Excel (.xls / BIFF) extractor, first sheet only."""

from __future__ import annotations

from typing import Any

import xlrd

from agentlists.core.constants import FileFormat
from agentlists.core.logging import get_logger
from agentlists.pipeline.errors import MalformedInputError
from agentlists.processing.extractors.base import BaseExtractor, rows_to_records

logger = get_logger(__name__)


class XlrdSheetAdapter:
    """Row-wise view over an xlrd sheet with Python-typed cell values."""

    def __init__(self, sheet, datemode: int) -> None:
        self._s = sheet
        self._datemode = datemode
        self.title = sheet.name
        self.nrows = sheet.nrows
        self.ncols = sheet.ncols

    def value(self, r: int, c: int) -> Any:
        cell = self._s.cell(r, c)
        ctype = cell.ctype
        if ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
            return None
        if ctype == xlrd.XL_CELL_NUMBER:
            # BIFF stores every number as a double
            return int(cell.value) if float(cell.value).is_integer() else cell.value
        if ctype == xlrd.XL_CELL_BOOLEAN:
            return bool(cell.value)
        if ctype == xlrd.XL_CELL_DATE:
            return xlrd.xldate_as_datetime(cell.value, self._datemode)
        return cell.value

    def rows(self):
        for r in range(self.nrows):
            yield [self.value(r, c) for c in range(self._s.row_len(r))]


class XlsExtractor(BaseExtractor):
    format_type = FileFormat.XLS

    def extract(self, content: bytes) -> list[dict[str, Any]]:
        try:
            workbook = xlrd.open_workbook(file_contents=content, on_demand=True)
        except Exception as exc:
            raise MalformedInputError(
                f"Excel workbook could not be opened: {exc}",
                details={"format": self.format_type},
            ) from exc

        try:
            if workbook.nsheets == 0:
                return []
            sheet = XlrdSheetAdapter(workbook.sheet_by_index(0), workbook.datemode)
            logger.debug("Reading first sheet", sheet=sheet.title, sheets=workbook.nsheets)
            return rows_to_records(sheet.rows(), skip_empty_cells=True)
        except Exception as exc:
            raise MalformedInputError(
                f"Excel sheet could not be read: {exc}",
                details={"format": self.format_type},
            ) from exc
        finally:
            workbook.release_resources()
