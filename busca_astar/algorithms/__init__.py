from .a_star import SearchStats, a_star, reconstruct_path, route
from .dijkstra import dijkstra
from .frontier import OpenSet
from .search_node import NodeStore, SearchNode

__all__ = [
    "route",
    "a_star",
    "dijkstra",
    "reconstruct_path",
    "SearchStats",
    "OpenSet",
    "NodeStore",
    "SearchNode",
]
