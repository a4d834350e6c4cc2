"""
Distribution Partitioner — deterministic round-robin over the first N agents.

Pure function of its inputs: the same records in the same order with the
same worker order always produce the same groups.  The pool is taken in
the order the caller hands it over; nothing here sorts or ranks agents.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from agentlists.core.constants import DEFAULT_AGENT_COUNT
from agentlists.pipeline.errors import InsufficientWorkersError


@dataclass(frozen=True)
class DistributionBatch:
    """Records destined for each selected worker in one import."""

    workers: tuple[Hashable, ...]
    groups: tuple[tuple[dict[str, Any], ...], ...]

    @property
    def total(self) -> int:
        return sum(len(group) for group in self.groups)

    def group_for(self, worker: Hashable) -> tuple[dict[str, Any], ...]:
        return self.groups[self.workers.index(worker)]

    def counts(self) -> dict[Hashable, int]:
        return {worker: len(group) for worker, group in zip(self.workers, self.groups)}

    def assignments(self) -> Iterator[tuple[Hashable, dict[str, Any]]]:
        """(worker, record) pairs, worker-major: all of worker 0 first."""
        for worker, group in zip(self.workers, self.groups):
            for record in group:
                yield worker, record


def insufficient_workers_message(agent_count: int) -> str:
    return f"At least {agent_count} agents are required to distribute lists"


def distribute(
    items: Sequence[dict[str, Any]],
    workers: Sequence[Hashable],
    agent_count: int = DEFAULT_AGENT_COUNT,
) -> DistributionBatch:
    """
    Assign item i to worker ``i % agent_count`` of ``workers[:agent_count]``.

    Raises:
        InsufficientWorkersError: fewer than agent_count workers given.
    """
    if agent_count < 1:
        raise ValueError("agent_count must be at least 1")

    if len(workers) < agent_count:
        raise InsufficientWorkersError(
            insufficient_workers_message(agent_count),
            required=agent_count,
            available=len(workers),
        )

    selected = tuple(workers[:agent_count])
    groups: list[list[dict[str, Any]]] = [[] for _ in selected]
    for idx, item in enumerate(items):
        groups[idx % agent_count].append(item)

    return DistributionBatch(
        workers=selected,
        groups=tuple(tuple(group) for group in groups),
    )
