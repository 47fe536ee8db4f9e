import pytest

from fifocache.node import MAX_COUNT, Node, Placement


def _node(placement=Placement.NONE, hits=0):
    node = Node("v", 1)
    node.placement = placement
    for _ in range(hits):
        node.hit()
    return node


@pytest.mark.parametrize(
    "placement, text",
    [
        (Placement.NONE, "none"),
        (Placement.MAIN, "main"),
        (Placement.GHOST, "ghost"),
        (Placement.SMALL, "small"),
    ],
)
def test_placement_values(placement, text):
    assert placement.value == text


def test_new_node_state():
    node = Node("v", 42)
    assert (node.value, node.hash, node.count) == ("v", 42, 0)
    assert node.placement is Placement.NONE
    assert node.next is None and node.prev is None


@pytest.mark.parametrize("hits, expected", [(1, 1), (MAX_COUNT, MAX_COUNT), (MAX_COUNT + 5, MAX_COUNT)])
def test_hit_saturates(hits, expected):
    assert _node(hits=hits).count == expected


def test_reset_count():
    node = _node(hits=2)
    node.reset_count()
    assert node.count == 0


@pytest.mark.parametrize(
    "placement, hits, room, expected",
    [
        (Placement.SMALL, 0, True, Placement.MAIN),
        (Placement.SMALL, 1, True, Placement.MAIN),
        (Placement.SMALL, 0, False, Placement.GHOST),
        (Placement.SMALL, 1, False, Placement.MAIN),
        (Placement.MAIN, 0, False, Placement.NONE),
        (Placement.GHOST, 0, True, Placement.NONE),
        (Placement.NONE, 0, True, Placement.NONE),
    ],
)
def test_next_placement(placement, hits, room, expected):
    node = _node(placement, hits)
    assert node.next_placement(room) is expected
    if placement is Placement.SMALL:
        assert node.count == 0


def test_main_reinserts_while_count_remains():
    node = _node(Placement.MAIN, MAX_COUNT)
    results = [node.next_placement(False) for _ in range(MAX_COUNT + 1)]
    assert results == [Placement.MAIN] * MAX_COUNT + [Placement.NONE]