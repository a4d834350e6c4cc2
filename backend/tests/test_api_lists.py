"""HTTP surface of the lists router, with in-memory collaborators."""

import uuid

from agentlists.core.config import settings
from agentlists.core.constants import ErrorCode
from agentlists.store.memory import InMemoryAssignmentStore
from conftest import contact_rows, csv_bytes

UPLOAD_URL = "/api/v1/lists/upload"


def _upload(client, filename, content, content_type="text/csv"):
    return client.post(UPLOAD_URL, files={"file": (filename, content, content_type)})


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_upload_distributes_and_saves(client, agent_ids):
    response = _upload(client, "contacts.csv", csv_bytes(contact_rows(12)))

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "List distributed and saved"
    assert body["records"] == 12
    assert [a["agent_id"] for a in body["agents"]] == [str(a) for a in agent_ids]
    assert [a["count"] for a in body["agents"]] == [3, 3, 2, 2, 2]


def test_agent_list_after_upload(client, agent_ids):
    _upload(client, "contacts.csv", csv_bytes(contact_rows(12)))

    response = client.get(f"/api/v1/lists/agent/{agent_ids[1]}")

    assert response.status_code == 200
    items = response.json()
    assert [item["firstName"] for item in items] == ["Name1", "Name6", "Name11"]
    assert items[0]["phone"] == "55500001"
    assert items[0]["notes"] == "note 1"
    assert items[0]["agentId"] == str(agent_ids[1])
    assert items[0]["id"]
    assert items[0]["createdAt"]


def test_unknown_agent_has_empty_list(client):
    response = client.get(f"/api/v1/lists/agent/{uuid.uuid4()}")

    assert response.status_code == 200
    assert response.json() == []


def test_no_file(client):
    response = client.post(UPLOAD_URL, files={"attachment": ("a.csv", b"x", "text/csv")})

    assert response.status_code == 400
    assert response.json()["message"] == "No file uploaded"
    assert response.json()["error_code"] == ErrorCode.NO_FILE


def test_unsupported_format(client, store):
    response = _upload(client, "contacts.txt", b"FirstName,Phone,Notes\n", "text/plain")

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Only csv, xlsx, xls files allowed"
    assert body["error_code"] == "UNSUPPORTED_FORMAT"
    assert body["imported"] is False
    assert store.items == []


def test_missing_required_column(client, store):
    rows = contact_rows(10)
    rows.append(["Eleven", "5559999"])

    response = _upload(client, "contacts.csv", csv_bytes(rows))

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid file format. Required columns: FirstName, Phone, Notes"
    assert body["error_code"] == "SCHEMA_ERROR"
    assert body["details"]["missing"] == ["notes"]
    assert body["details"]["row_indexes"] == [10]
    assert store.items == []


def test_not_enough_agents(client, registry, store):
    registry.agents = registry.agents[:4]

    response = _upload(client, "contacts.csv", csv_bytes(contact_rows(12)))

    assert response.status_code == 400
    assert response.json()["message"] == "At least 5 agents are required to distribute lists"
    assert response.json()["error_code"] == "INSUFFICIENT_WORKERS"
    assert store.items == []


def test_malformed_spreadsheet(client):
    response = _upload(
        client,
        "contacts.xlsx",
        b"garbage",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "MALFORMED_INPUT"


def test_partial_import_reports_what_was_saved(client, service):
    failing = InMemoryAssignmentStore(fail_after=7)
    service.store_factory = lambda run_id: failing

    response = _upload(client, "contacts.csv", csv_bytes(contact_rows(12)))

    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "STORE_ERROR"
    assert body["imported"] is True
    assert body["details"] == {"persisted": 7, "total": 12}
    assert len(failing.items) == 7


def test_file_too_large(client, monkeypatch, store):
    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 16)

    response = _upload(client, "contacts.csv", csv_bytes(contact_rows(3)))

    assert response.status_code == 413
    assert response.json()["error_code"] == ErrorCode.FILE_TOO_LARGE
    assert store.items == []
