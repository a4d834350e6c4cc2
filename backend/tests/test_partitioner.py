import pytest

from agentlists.core.constants import ErrorCode
from agentlists.distribution.partitioner import distribute
from agentlists.pipeline.errors import InsufficientWorkersError

WORKERS = ["W0", "W1", "W2", "W3", "W4"]


def _items(n: int) -> list[dict]:
    return [{"pos": i} for i in range(n)]


def test_round_robin_over_five_workers():
    batch = distribute(_items(12), WORKERS)

    assert list(batch.counts().values()) == [3, 3, 2, 2, 2]
    assert [item["pos"] for item in batch.group_for("W0")] == [0, 5, 10]
    assert [item["pos"] for item in batch.group_for("W1")] == [1, 6, 11]
    assert [item["pos"] for item in batch.group_for("W4")] == [4, 9]
    assert batch.total == 12


def test_group_sizes_differ_by_at_most_one():
    for n in range(0, 23):
        sizes = list(distribute(_items(n), WORKERS).counts().values())
        assert max(sizes) - min(sizes) <= 1
        assert sum(sizes) == n


def test_fewer_items_than_workers():
    batch = distribute(_items(3), WORKERS)

    assert list(batch.counts().values()) == [1, 1, 1, 0, 0]


def test_only_the_first_n_workers_are_used():
    batch = distribute(_items(10), WORKERS + ["W5", "W6"])

    assert batch.workers == tuple(WORKERS)
    assert "W5" not in batch.counts()


def test_insufficient_workers():
    with pytest.raises(InsufficientWorkersError) as excinfo:
        distribute(_items(12), WORKERS[:4])

    err = excinfo.value
    assert err.code == ErrorCode.INSUFFICIENT_WORKERS
    assert err.message == "At least 5 agents are required to distribute lists"
    assert err.details == {"required": 5, "available": 4}


def test_distribution_is_deterministic():
    items = _items(17)

    assert distribute(items, WORKERS) == distribute(items, WORKERS)


def test_assignments_are_worker_major():
    batch = distribute(_items(7), WORKERS)

    pairs = [(worker, item["pos"]) for worker, item in batch.assignments()]

    assert pairs == [
        ("W0", 0), ("W0", 5),
        ("W1", 1), ("W1", 6),
        ("W2", 2),
        ("W3", 3),
        ("W4", 4),
    ]


def test_custom_agent_count():
    batch = distribute(_items(4), WORKERS, agent_count=2)

    assert list(batch.counts().values()) == [2, 2]


def test_agent_count_must_be_positive():
    with pytest.raises(ValueError):
        distribute(_items(4), WORKERS, agent_count=0)
