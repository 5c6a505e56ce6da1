import pytest

from busca_astar.algorithms.frontier import OpenSet
from busca_astar.algorithms.search_node import NodeStore, SearchNode


def _node(index, g, h, order, vertex=None):
    n = SearchNode(index, vertex if vertex is not None else f"v{index}", h)
    n.reset(None, None, g, order)
    return n


def test_pops_lowest_f_first():
    open_set = OpenSet()
    open_set.push(_node(0, g=5, h=1, order=0))
    open_set.push(_node(1, g=1, h=1, order=1))
    open_set.push(_node(2, g=3, h=1, order=2))
    assert [open_set.pop().index for _ in range(3)] == [1, 2, 0]


def test_equal_f_prefers_lower_h():
    open_set = OpenSet()
    open_set.push(_node(0, g=1, h=4, order=0))
    open_set.push(_node(1, g=4, h=1, order=1))
    open_set.push(_node(2, g=3, h=2, order=2))
    assert [open_set.pop().index for _ in range(3)] == [1, 2, 0]


def test_equal_f_and_h_prefers_most_recent_insertion():
    open_set = OpenSet()
    open_set.push(_node(0, g=2, h=3, order=4))
    open_set.push(_node(1, g=2, h=3, order=9))
    open_set.push(_node(2, g=2, h=3, order=7))
    assert [open_set.pop().index for _ in range(3)] == [1, 2, 0]


def test_push_keeps_single_entry_per_node():
    open_set = OpenSet()
    n = _node(0, g=5, h=0, order=0)
    open_set.push(n)
    n.reset(None, None, 1, 1)
    open_set.push(n)
    assert len(open_set) == 1
    assert open_set.pop() is n
    assert not open_set
    with pytest.raises(KeyError):
        open_set.pop()


def test_remove_by_identity():
    open_set = OpenSet()
    a, b = _node(0, g=1, h=0, order=0), _node(1, g=2, h=0, order=1)
    open_set.push(a)
    open_set.push(b)
    assert a in open_set
    assert open_set.remove(a) is True
    assert a not in open_set
    assert open_set.remove(a) is False
    assert len(open_set) == 1
    assert open_set.pop() is b


class _ConstantHeuristic:
    def __init__(self):
        self.calls = 0

    def estimate(self, from_, to):
        self.calls += 1
        return 2.0


def test_node_store_is_idempotent():
    h = _ConstantHeuristic()
    store = NodeStore(h, goal="z")
    a = store.get_node("a")
    assert store.get_node("a") is a
    assert a.h == 2.0
    assert a.g == float("inf")
    assert a.prev is None and a.edge is None
    assert h.calls == 1
    assert "a" in store and "b" not in store
    b = store.get_node("b")
    assert store.node(b.index) is b
    assert len(store) == 2
    assert store.heuristic_evaluations == 2
