import math

import pytest

from busca_astar import Diagonal, Euclidean, Taxicab, Tiebreaker, as_heuristic, route
from busca_astar.scenarios import build_grid
from busca_astar.simple_graph import Vertex


A = Vertex(1, 2)
B = Vertex(4, 6)


def test_taxicab():
    assert Taxicab().estimate(A, B) == 7


def test_diagonal():
    assert Diagonal().estimate(A, B) == 4


def test_euclidean():
    assert Euclidean().estimate(A, B) == pytest.approx(5.0)


def test_estimates_are_symmetric_and_zero_at_goal():
    for h in (Taxicab(), Diagonal(), Euclidean()):
        assert h.estimate(A, B) == h.estimate(B, A)
        assert h.estimate(A, A) == 0


def test_tiebreaker_adds_scaled_cross_product():
    h = Tiebreaker(0.5, Taxicab())
    # |1*6 - 4*2| = 2
    assert h.estimate(A, B) == 7 + 0.5 * 2


def test_tiebreaker_is_neutral_on_colinear_points():
    h = Tiebreaker(10.0, Euclidean())
    assert h.estimate(Vertex(1, 1), Vertex(3, 3)) == pytest.approx(math.sqrt(8))


def test_custom_coordinate_accessor():
    pos = {"a": (0, 0), "b": (3, 4)}
    assert Euclidean(coords=pos.__getitem__).estimate("a", "b") == pytest.approx(5.0)


def test_as_heuristic_wraps_callables():
    h = as_heuristic(lambda a, b: 42.0)
    assert h.estimate(None, None) == 42.0
    t = Taxicab()
    assert as_heuristic(t) is t
    with pytest.raises(TypeError):
        as_heuristic(3)


def test_tiebreaker_accepts_callable_delegate():
    h = Tiebreaker(0.5, lambda a, b: 7.0)
    assert h.estimate(A, B) == 7 + 0.5 * 2


def test_grid_accepts_callable_heuristic():
    g, grid = build_grid(3, 3, heuristic=lambda a, b: 0.0)
    assert g.get_heuristic().estimate(grid[0][0], grid[2][2]) == 0.0
    path = route(g, grid[0][0], grid[2][2])
    assert g.cost(path) == 4.0


def test_simple_graph_accepts_callable_tiebreaker_chain():
    h = Tiebreaker(1e-6, lambda a, b: abs(a.x - b.x) + abs(a.y - b.y))
    g, grid = build_grid(4, 4, heuristic=h)
    assert g.cost(route(g, grid[0][0], grid[3][3])) == 6.0
