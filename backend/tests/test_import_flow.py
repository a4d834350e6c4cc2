"""End-to-end import flow against in-memory collaborators."""

import asyncio
import uuid

from agentlists.core.constants import ErrorCode, PipelineStatus, StepStatus
from agentlists.pipeline.context import PipelineContext
from agentlists.pipeline.engine import PipelineEngine
from agentlists.pipeline.flow import import_flow
from agentlists.processing.pipeline import ImportService
from agentlists.store.memory import InMemoryAssignmentStore, StaticAgentRegistry
from conftest import contact_rows, csv_bytes, xlsx_bytes


def _run(service, filename, content):
    return asyncio.run(service.import_file(filename, content)).result


def _service(store, agents):
    return ImportService(
        registry=StaticAgentRegistry(agents),
        store_factory=lambda run_id: store,
        agent_count=5,
    )


def test_successful_import_spreads_contacts(service, store, agent_ids):
    result = _run(service, "contacts.csv", csv_bytes(contact_rows(12)))

    assert result.status == PipelineStatus.COMPLETED
    assert result.succeeded
    assert result.records_persisted == 12
    assert result.steps_completed == result.total_steps == 7
    assert result.context_summary["per_agent"] == {
        str(agent_ids[0]): 3,
        str(agent_ids[1]): 3,
        str(agent_ids[2]): 2,
        str(agent_ids[3]): 2,
        str(agent_ids[4]): 2,
    }
    first_agent = asyncio.run(store.find_by_worker(agent_ids[0]))
    assert [item.first_name for item in first_agent] == ["Name0", "Name5", "Name10"]


def test_mixed_case_headers_import(service, store):
    rows = contact_rows(5, header=["FIRSTNAME", " phone", "Notes "])

    result = _run(service, "contacts.csv", csv_bytes(rows))

    assert result.status == PipelineStatus.COMPLETED
    assert len(store.items) == 5


def test_xlsx_numbers_are_saved_as_text(service, store):
    content = xlsx_bytes([["FirstName", "Phone", "Notes"], ["Ann", 5551234, 7]])

    result = _run(service, "contacts.xlsx", content)

    assert result.status == PipelineStatus.COMPLETED
    assert store.items[0].phone == "5551234"
    assert store.items[0].notes == "7"


def test_unsupported_extension_stops_before_extraction(service, store):
    result = _run(service, "contacts.pdf", b"%PDF-1.4 whatever")

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.UNSUPPORTED_FORMAT
    assert [step["step_name"] for step in result.step_results] == ["detect_format"]
    assert store.items == []


def test_malformed_workbook(service, store):
    result = _run(service, "contacts.xlsx", b"not really a zip")

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.MALFORMED_INPUT
    assert store.items == []


def test_schema_failure_persists_nothing(service, store):
    rows = contact_rows(10)
    rows.append(["Eleven", "5559999"])

    result = _run(service, "contacts.csv", csv_bytes(rows))

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.SCHEMA_ERROR
    assert result.error == "Invalid file format. Required columns: FirstName, Phone, Notes"
    assert result.error_details["missing"] == ["notes"]
    assert store.items == []


def test_whitespace_only_cell_rejects_the_file(service, store):
    content = b"FirstName,Phone,Notes\nAnn,   ,call\n" + b"".join(
        f"Name{i},{i},note\n".encode() for i in range(1, 5)
    )

    result = _run(service, "contacts.csv", content)

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.SCHEMA_ERROR
    assert result.error_details["missing"] == ["phone"]
    assert result.error_details["row_indexes"] == [0]
    assert store.items == []


def test_four_agents_persist_nothing(store):
    service = _service(store, [uuid.uuid4() for _ in range(4)])

    result = _run(service, "contacts.csv", csv_bytes(contact_rows(12)))

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.INSUFFICIENT_WORKERS
    assert result.error_details == {"required": 5, "available": 4}
    assert store.items == []


def test_empty_file_imports_nothing(service, store):
    result = _run(service, "contacts.csv", b"FirstName,Phone,Notes\n")

    assert result.status == PipelineStatus.COMPLETED
    assert result.records_persisted == 0
    assert store.items == []


def test_store_failure_keeps_written_prefix(agent_ids):
    store = InMemoryAssignmentStore(fail_after=4)
    service = _service(store, agent_ids)

    result = _run(service, "contacts.csv", csv_bytes(contact_rows(12)))

    assert result.status == PipelineStatus.PARTIALLY_COMPLETED
    assert result.error_code == ErrorCode.STORE_ERROR
    assert result.error_details == {"persisted": 4, "total": 12}
    assert result.error.startswith("Import incomplete: saved 4 of 12 contacts.")
    # worker-major: all of agent 0, then agent 1's first
    assert [item.first_name for item in store.items] == ["Name0", "Name5", "Name10", "Name1"]


def test_store_failure_on_first_write_is_a_plain_failure(agent_ids):
    store = InMemoryAssignmentStore(fail_after=0)
    service = _service(store, agent_ids)

    result = _run(service, "contacts.csv", csv_bytes(contact_rows(3)))

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.STORE_ERROR
    assert result.records_persisted == 0


def test_registry_failure_is_a_step_failure(store):
    class BrokenRegistry:
        async def list_active(self):
            raise ConnectionError("database unavailable")

    service = ImportService(registry=BrokenRegistry(), store_factory=lambda run_id: store)

    result = _run(service, "contacts.csv", csv_bytes(contact_rows(5)))

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.STEP_FAILED
    assert "database unavailable" in result.error
    assert store.items == []


def test_audit_sees_start_and_finish(service, store):
    class RecordingAudit:
        def __init__(self):
            self.calls = []

        async def start(self, filename):
            self.calls.append(("start", filename))
            return "run-1"

        async def finish(self, run_id, result):
            self.calls.append(("finish", run_id, result.status))

    audit = RecordingAudit()
    service.audit = audit

    outcome = asyncio.run(service.import_file("contacts.csv", csv_bytes(contact_rows(5))))

    assert outcome.import_id == "run-1"
    assert audit.calls == [("start", "contacts.csv"), ("finish", "run-1", PipelineStatus.COMPLETED)]


def test_engine_without_steps_fails():
    result = asyncio.run(PipelineEngine(steps=[]).run("contacts.csv", b""))

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.PIPELINE_ERROR


def test_run_steps_with_prebuilt_context(store, registry):
    ctx = PipelineContext(filename="contacts.csv", content=csv_bytes(contact_rows(2)))

    result = asyncio.run(PipelineEngine().run_steps(ctx, import_flow(store, registry, agent_count=5)))

    assert result.status == PipelineStatus.COMPLETED
    assert all(step["status"] == StepStatus.COMPLETED for step in result.step_results)
    assert ctx.persisted_count == 2


def test_zero_agent_count_is_not_replaced_by_the_default(store, registry):
    service = ImportService(registry=registry, store_factory=lambda run_id: store, agent_count=0)

    result = _run(service, "contacts.csv", csv_bytes(contact_rows(3)))

    assert result.status == PipelineStatus.FAILED
    assert result.error_code == ErrorCode.PIPELINE_ERROR
    assert "agent_count must be at least 1" in result.error
    assert store.items == []
