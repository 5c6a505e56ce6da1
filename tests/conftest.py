import logging
import math
import random

import networkx as nx
import pytest

from busca_astar.logging_utils import LOGGER_NAME
from busca_astar.scenarios import apply_hill, build_grid


@pytest.fixture(scope="module")
def hill_grid():
    """Grade 100x100 com morro (peso 200) entre as colunas 50 e 51 nas linhas 0..49."""
    g, grid = build_grid(100, 100)
    apply_hill(g, grid)
    return g, grid


class CountingHeuristic:
    """Conta chamadas de estimate() por vértice de origem."""

    def __init__(self, delegate):
        self.delegate = delegate
        self.calls = {}

    def estimate(self, from_, to):
        self.calls[from_] = self.calls.get(from_, 0) + 1
        return self.delegate.estimate(from_, to)


def random_geometric_digraph(seed: int, n: int = 40, p: float = 0.12) -> nx.DiGraph:
    """
    Grafo aleatório com 'pos' nos nós e peso >= distância euclidiana,
    de modo que a heurística em linha reta seja admissível e consistente.
    """
    rng = random.Random(seed)
    G = nx.DiGraph()
    for i in range(n):
        G.add_node(i, pos=(rng.uniform(0, 100), rng.uniform(0, 100)))
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < p:
                (x1, y1), (x2, y2) = G.nodes[u]["pos"], G.nodes[v]["pos"]
                dist = math.hypot(x1 - x2, y1 - y2)
                G.add_edge(u, v, weight=dist * rng.uniform(1.0, 3.0))
    return G


@pytest.fixture
def reset_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    if hasattr(logger, "_configured"):
        del logger._configured
