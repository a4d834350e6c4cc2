"""
Tabular Decoder — bytes + declared extension → raw records.

The whole buffer is decoded in one pass and every record is
materialised before returning.
"""

from __future__ import annotations

from typing import Any

from agentlists.core.logging import get_logger
from agentlists.pipeline.errors import UnsupportedFormatError
from agentlists.processing.extractors import get_extractor
from agentlists.processing.format_detector import format_for_extension

logger = get_logger(__name__)

RawRecord = dict[str, Any]


def decode(content: bytes, extension: str) -> list[RawRecord]:
    """
    Decode an uploaded buffer into raw header-keyed records.

    Raises:
        UnsupportedFormatError: extension is not csv/xlsx/xls.
        MalformedInputError: bytes do not parse as that format.
    """
    fmt = format_for_extension(extension)
    extractor = get_extractor(fmt)
    if extractor is None:
        raise UnsupportedFormatError(f"No extractor registered for {fmt}", extension=extension)

    records = extractor.extract(content)
    logger.debug("Decoded upload", format=fmt, size_bytes=len(content), records=len(records))
    return records
