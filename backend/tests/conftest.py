"""Shared fixtures: file builders, in-memory collaborators, API client."""

from __future__ import annotations

import io
import uuid

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook
import xlwt

from agentlists.api.deps import get_assignment_store, get_import_service
from agentlists.main import app
from agentlists.processing.pipeline import ImportService
from agentlists.store.memory import InMemoryAssignmentStore, StaticAgentRegistry


# ============================================================================
# File builders
# ============================================================================

def csv_bytes(rows: list[list[str]]) -> bytes:
    return ("\n".join(",".join(row) for row in rows) + "\n").encode("utf-8")


def xlsx_bytes(rows: list[list[object]], extra_sheets: dict[str, list[list[object]]] | None = None) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Contacts"
    for row in rows:
        ws.append(row)
    for title, sheet_rows in (extra_sheets or {}).items():
        extra = wb.create_sheet(title)
        for row in sheet_rows:
            extra.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def xls_bytes(sheets: dict[str, list[list[object]]]) -> bytes:
    """Legacy BIFF workbook; sheets are written in the given order, None cells left empty."""
    wb = xlwt.Workbook()
    for title, rows in sheets.items():
        ws = wb.add_sheet(title)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value is not None:
                    ws.write(r, c, value)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def contact_rows(n: int, header: list[str] | None = None) -> list[list[str]]:
    """Header plus n valid contact rows; row i has FirstName 'Name{i}'."""
    rows = [header or ["FirstName", "Phone", "Notes"]]
    rows.extend([f"Name{i}", f"555000{i:02d}", f"note {i}"] for i in range(n))
    return rows


# ============================================================================
# Collaborators
# ============================================================================

@pytest.fixture
def agent_ids() -> list[uuid.UUID]:
    return [uuid.uuid4() for _ in range(5)]


@pytest.fixture
def store() -> InMemoryAssignmentStore:
    return InMemoryAssignmentStore()


@pytest.fixture
def registry(agent_ids: list[uuid.UUID]) -> StaticAgentRegistry:
    return StaticAgentRegistry(agent_ids)


@pytest.fixture
def service(store: InMemoryAssignmentStore, registry: StaticAgentRegistry) -> ImportService:
    return ImportService(
        registry=registry,
        store_factory=lambda run_id: store,
        agent_count=5,
    )


@pytest.fixture
def client(service: ImportService, store: InMemoryAssignmentStore):
    app.dependency_overrides[get_import_service] = lambda: service
    app.dependency_overrides[get_assignment_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
