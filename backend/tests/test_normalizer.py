from agentlists.processing.decoder import decode
from agentlists.processing.normalizer import canonical_key, normalize_record, normalize_records
from agentlists.validation.schema_validator import validate_records


def test_canonical_key_trims_and_lowercases():
    assert canonical_key("  FirstName ") == "firstname"
    assert canonical_key("PHONE") == "phone"
    assert canonical_key(42) == "42"


def test_values_pass_through_untouched():
    assert normalize_record({"Phone": 5551234, "Notes": "  spaced  "}) == {
        "phone": 5551234,
        "notes": "  spaced  ",
    }


def test_colliding_keys_last_one_wins():
    assert normalize_record({"Phone": "1", "phone ": "2"}) == {"phone": "2"}
    assert normalize_record({"phone ": "2", "Phone": "1"}) == {"phone": "1"}


def test_header_casing_does_not_change_the_outcome():
    a = b"FirstName,Phone,Notes\nAnn,555,call\n"
    b = b"firstname,PHONE ,notes\nAnn,555,call\n"

    assert validate_records(normalize_records(decode(a, ".csv"))) == validate_records(
        normalize_records(decode(b, ".csv"))
    )


def test_normalize_records_keeps_order():
    raws = [{"FirstName": "A"}, {"FirstName": "B"}, {"FirstName": "C"}]

    assert [r["firstname"] for r in normalize_records(raws)] == ["A", "B", "C"]
