"""
Format Detector — maps an upload's filename extension to a FileFormat.

Only the three tabular formats are accepted; anything else is rejected
here, before any decoder touches the bytes.
"""

from __future__ import annotations

import os

from agentlists.core.constants import FileFormat
from agentlists.pipeline.errors import UnsupportedFormatError

# Extension → format mapping
EXTENSION_MAP: dict[str, FileFormat] = {
    ".csv": FileFormat.CSV,
    ".xlsx": FileFormat.XLSX,
    ".xls": FileFormat.XLS,
}

ALLOWED_EXTENSIONS: tuple[str, ...] = tuple(EXTENSION_MAP)


def extension_of(filename: str) -> str:
    """Lower-cased extension including the dot, or "" when there is none."""
    return os.path.splitext(filename or "")[1].lower()


def format_for_extension(extension: str) -> FileFormat:
    """
    Resolve a declared extension (".csv", "XLSX", ...) to a FileFormat.

    Raises:
        UnsupportedFormatError: extension is not in the allow-list.
    """
    ext = (extension or "").strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"

    fmt = EXTENSION_MAP.get(ext)
    if fmt is None:
        raise UnsupportedFormatError(
            "Only csv, xlsx, xls files allowed",
            extension=ext,
            details={"allowed": list(ALLOWED_EXTENSIONS)},
        )
    return fmt


def detect_format(filename: str) -> FileFormat:
    """Detect the upload format from the original filename."""
    return format_for_extension(extension_of(filename))
