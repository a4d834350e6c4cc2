#!/usr/bin/env python3
"""
Demo script — run the import pipeline locally without a database.

Imports a csv/xlsx/xls file against an in-memory store and a pool of
made-up agents, then prints the step trace and the per-agent split.

Usage:
    cd backend
    python -m scripts.demo_import path/to/contacts.csv [--agents 5]
"""

import argparse
import asyncio
import sys
from pathlib import Path


def _print_result(outcome, store):
    """Pretty-print an import outcome."""
    result = outcome.result
    print(f"\n{'─' * 50}")
    print(f"  Execution ID : {result.execution_id[:12]}...")
    print(f"  Status       : {result.status}")
    print(f"  Steps        : {result.steps_completed}/{result.total_steps}")
    print(f"  Duration     : {result.total_duration_ms}ms")
    if result.error:
        print(f"  Error        : [{result.error_code}] {result.error}")
        if result.error_details:
            print(f"  Details      : {result.error_details}")

    print("\n  Step Results:")
    for sr in result.step_results:
        icon = "✓" if sr["status"] == "COMPLETED" else "✗"
        print(f"    {icon} {sr['step_name']} ({sr['duration_ms']}ms)")
        for k, v in sr.get("metadata", {}).items():
            if k != "traceback":
                print(f"        {k}: {v}")

    per_agent = result.context_summary.get("per_agent", {})
    if per_agent:
        print("\n  Per agent:")
        for agent, count in per_agent.items():
            print(f"    - {agent}: {count} contacts")
            sample = [item for item in store.items if str(item.agent_id) == agent][:3]
            for item in sample:
                print(f"        {item.first_name} / {item.phone}")

    print(f"{'─' * 50}\n")


async def run(path: Path, agents: int):
    from agentlists.processing.pipeline import ImportService
    from agentlists.store.memory import InMemoryAssignmentStore, StaticAgentRegistry

    store = InMemoryAssignmentStore()
    service = ImportService(
        registry=StaticAgentRegistry(f"agent-{n + 1}" for n in range(agents)),
        store_factory=lambda run_id: store,
    )
    outcome = await service.import_file(path.name, path.read_bytes())
    return outcome, store


def main() -> int:
    from agentlists.core.logging import setup_logging

    parser = argparse.ArgumentParser(description="Run one contact list import in memory")
    parser.add_argument("path", type=Path)
    parser.add_argument("--agents", type=int, default=5, help="agents in the demo pool")
    args = parser.parse_args()

    setup_logging("WARNING")     # quiet logs, show formatted output only

    outcome, store = asyncio.run(run(args.path, args.agents))
    _print_result(outcome, store)
    return 0 if outcome.result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
