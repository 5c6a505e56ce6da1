# Busca A* sobre grafos direcionados ponderados fornecidos pelo chamador.
# Heurísticas cartesianas, adaptador NetworkX, Dijkstra de referência e cenários de grade.

import logging

from .settings import Settings, load_env_file

load_env_file()
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .algorithms import SearchStats, a_star, dijkstra, route
from .graph import Graph, Heuristic, NetworkXGraph, as_heuristic, path_cost
from .heuristics import Diagonal, Euclidean, Taxicab, Tiebreaker

__all__ = [
    "route",
    "a_star",
    "dijkstra",
    "SearchStats",
    "Graph",
    "Heuristic",
    "NetworkXGraph",
    "as_heuristic",
    "path_cost",
    "Taxicab",
    "Diagonal",
    "Euclidean",
    "Tiebreaker",
    "Settings",
]
