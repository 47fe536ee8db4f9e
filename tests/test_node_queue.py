import pytest

from fifocache.node import Node
from fifocache.node_queue import NodeQueue


def _queue(capacity, *values):
    queue = NodeQueue(capacity)
    nodes = [Node(v) for v in values]
    for node in nodes:
        queue.put(node)
    return queue, nodes


def _drain(queue):
    values = []
    while len(queue):
        values.append(queue.pop())
    return values


def test_new_node_queue():
    q = NodeQueue(3)
    assert q.capacity == 3
    assert len(q) == 0


def test_put_without_eviction_returns_none():
    q = NodeQueue(2)
    assert q.put(Node(1)) is None
    assert len(q) == 1
    assert _drain(q) == [1]


def test_put_node_eviction():
    q, (n1, _) = _queue(2, 1, 2)
    assert q.put(Node(3)) is n1
    assert len(q) == 2
    assert _drain(q) == [2, 3]


@pytest.mark.parametrize(
    "capacity, values, delete_index, remaining",
    [
        (3, (1, 2), None, [1, 2]),
        (3, (1, 2), 0, [2]),
        (3, (1, 2), 1, [1]),
        (3, (1, 2, 3), 1, [1, 3]),
        (1, (99,), 0, []),
    ],
)
def test_delete_and_drain(capacity, values, delete_index, remaining):
    q, nodes = _queue(capacity, *values)
    if delete_index is not None:
        q.delete(nodes[delete_index])
        q.delete(nodes[delete_index]) if not remaining else None
    assert _drain(q) == remaining
    assert len(q) == 0
    assert q.pop() is None


def test_delete_on_empty_queue_is_harmless():
    q, (n1,) = _queue(1, 100)
    q.delete(n1)
    q.delete(n1)
    assert q.pop() is None
    assert len(q) == 0


def test_len():
    q = NodeQueue(5)
    assert len(q) == 0
    q.put(Node(42))
    assert len(q) == 1


def test_iteration_order():
    q, _ = _queue(3, 1, 2, 3)
    assert [n.value for n in q] == [1, 2, 3]