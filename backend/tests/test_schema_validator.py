import pytest

from agentlists.core.constants import ErrorCode
from agentlists.pipeline.errors import SchemaError
from agentlists.validation.schema_validator import MAX_REPORTED_ROWS, missing_fields, validate_records


def _record(i: int) -> dict:
    return {"firstname": f"Name{i}", "phone": f"555{i}", "notes": f"note {i}"}


def test_valid_batch_is_returned_unchanged():
    records = [_record(i) for i in range(3)]

    assert validate_records(records) == records


def test_empty_batch_passes():
    assert validate_records([]) == []


def test_one_bad_record_rejects_the_whole_batch():
    records = [_record(i) for i in range(10)]
    records.append({"firstname": "Eleven", "phone": "555"})

    with pytest.raises(SchemaError) as excinfo:
        validate_records(records)

    err = excinfo.value
    assert err.code == ErrorCode.SCHEMA_ERROR
    assert err.message == "Invalid file format. Required columns: FirstName, Phone, Notes"
    assert err.missing == ["notes"]
    assert err.row_indexes == [10]
    assert err.details["required"] == ["firstname", "phone", "notes"]


@pytest.mark.parametrize("empty", ["", None, 0])
def test_falsy_values_count_as_missing(empty):
    assert missing_fields({"firstname": "Ann", "phone": empty, "notes": "x"}) == ["phone"]


def test_extra_columns_are_allowed():
    record = {**_record(1), "email": "ann@example.com"}

    assert validate_records([record]) == [record]


def test_reported_rows_are_capped():
    records = [{"firstname": "x"} for _ in range(MAX_REPORTED_ROWS + 5)]

    with pytest.raises(SchemaError) as excinfo:
        validate_records(records)

    assert len(excinfo.value.row_indexes) == MAX_REPORTED_ROWS
    assert excinfo.value.missing == ["phone", "notes"]


@pytest.mark.parametrize("blank", ["   ", "\t", " \n "])
def test_whitespace_only_values_count_as_missing(blank):
    records = [_record(0), {"firstname": "Ann", "phone": blank, "notes": "call"}]

    with pytest.raises(SchemaError) as excinfo:
        validate_records(records)

    assert excinfo.value.missing == ["phone"]
    assert excinfo.value.row_indexes == [1]
