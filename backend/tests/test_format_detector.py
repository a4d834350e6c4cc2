import pytest

from agentlists.core.constants import ErrorCode, FileFormat
from agentlists.pipeline.errors import UnsupportedFormatError
from agentlists.processing.format_detector import detect_format, extension_of, format_for_extension


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("contacts.csv", FileFormat.CSV),
        ("Contacts.CSV", FileFormat.CSV),
        ("march.list.xlsx", FileFormat.XLSX),
        ("legacy.xls", FileFormat.XLS),
    ],
)
def test_detect_format_from_filename(filename, expected):
    assert detect_format(filename) == expected


@pytest.mark.parametrize("filename", ["contacts.pdf", "contacts.txt", "contacts", "archive.xlsx.zip", ""])
def test_detect_format_rejects_other_extensions(filename):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        detect_format(filename)

    assert excinfo.value.code == ErrorCode.UNSUPPORTED_FORMAT
    assert excinfo.value.message == "Only csv, xlsx, xls files allowed"
    assert excinfo.value.details["allowed"] == [".csv", ".xlsx", ".xls"]


def test_format_for_extension_accepts_bare_names():
    assert format_for_extension("xlsx") == FileFormat.XLSX
    assert format_for_extension(" .CSV ") == FileFormat.CSV


def test_extension_of():
    assert extension_of("a/b/Contacts.XLSX") == ".xlsx"
    assert extension_of("noext") == ""
