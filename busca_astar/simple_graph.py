"""
Grafo simples em lista de adjacência com vértices cartesianos.
Usado pelos cenários de demonstração e pelos testes.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .heuristics import Taxicab, as_heuristic


class Vertex:
    """Vértice posicionado em (x, y). Igualdade por identidade."""

    __slots__ = ("x", "y", "edges")

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.edges: List["Edge"] = []

    def add_edges(self, *outbound: "Edge") -> "Vertex":
        for e in outbound:
            if e.src is not self:
                raise ValueError(f"Aresta {e} não sai de {self}")
            self.edges.append(e)
        return self

    def __repr__(self) -> str:
        return f"({self.x:g},{self.y:g})"


class Edge:
    __slots__ = ("src", "dest", "weight")

    def __init__(self, src: Vertex, dest: Vertex, w: float):
        self.src = src
        self.dest = dest
        self.weight = w

    def __repr__(self) -> str:
        return f"{self.src} --- [{self.weight:g}] ---> {self.dest}"


class SimpleGraph:
    def __init__(self, heuristic: Optional[Any] = None):
        self.estimator = as_heuristic(heuristic) if heuristic is not None else Taxicab()

    def get_heuristic(self) -> Any:
        return self.estimator

    def outbound_edges(self, source: Vertex) -> List[Edge]:
        return source.edges

    def get_target(self, edge: Edge) -> Vertex:
        return edge.dest

    def get_weight(self, edge: Edge) -> float:
        return edge.weight

    def set_weight(self, edge: Edge, w: float) -> None:
        edge.weight = w

    def cost(self, path: Iterable[Edge]) -> float:
        """Soma dos pesos das arestas do caminho."""
        return sum((e.weight for e in path), 0.0)
