"""
Extractor registry — one extractor per accepted upload format.

Swap an entry here to change how a format is decoded; later stages only
see the list of raw records.
"""

from agentlists.processing.extractors.base import BaseExtractor
from agentlists.processing.extractors.csv_extractor import CsvExtractor
from agentlists.processing.extractors.xls_extractor import XlsExtractor
from agentlists.processing.extractors.xlsx_extractor import XlsxExtractor

EXTRACTORS: list[BaseExtractor] = [
    CsvExtractor(),
    XlsxExtractor(),
    XlsExtractor(),
]


def get_extractor(format_type: str) -> BaseExtractor | None:
    """Return the first registered extractor supporting format_type."""
    for extractor in EXTRACTORS:
        if extractor.supports_format(format_type):
            return extractor
    return None


__all__ = ["BaseExtractor", "CsvExtractor", "XlsxExtractor", "XlsExtractor", "EXTRACTORS", "get_extractor"]
