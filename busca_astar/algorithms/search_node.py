"""
Registro de busca por vértice (SearchNode) e armazenamento por busca (NodeStore).

O NodeStore é uma arena: cada vértice descoberto ganha um índice fixo e o
predecessor de um nó é guardado como índice nessa arena, não como referência.
A heurística é avaliada uma única vez por vértice, no primeiro acesso.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional

from ..graph import Heuristic


class SearchNode:
    """Estado de um vértice dentro de uma busca: g, h, predecessor, aresta e ordem."""

    __slots__ = ("index", "vertex", "h", "g", "prev", "edge", "order")

    def __init__(self, index: int, vertex: Hashable, h: float):
        self.index = index
        self.vertex = vertex
        self.h = h
        self.g = float("inf")
        self.prev: Optional[int] = None
        self.edge: Any = None
        self.order = -1

    @property
    def f(self) -> float:
        return self.g + self.h

    def reset(self, prev: Optional[int], edge: Any, g: float, order: int) -> None:
        """Relaxa o nó: novo predecessor, aresta de chegada, custo g e número de ordem."""
        self.prev = prev
        self.edge = edge
        self.g = g
        self.order = order

    def __repr__(self) -> str:
        return f"SearchNode({self.vertex!r}, g={self.g}, h={self.h}, order={self.order})"


class NodeStore:
    """
    Mapa vértice -> SearchNode, válido apenas para uma chamada de busca.
    Nunca é compartilhado entre buscas: h depende do objetivo e os pesos podem mudar.
    """

    def __init__(self, heuristic: Heuristic, goal: Hashable):
        self._heuristic = heuristic
        self._goal = goal
        self._nodes: List[SearchNode] = []
        self._index: Dict[Hashable, int] = {}
        self.heuristic_evaluations = 0

    def get_node(self, vertex: Hashable) -> SearchNode:
        idx = self._index.get(vertex)
        if idx is not None:
            return self._nodes[idx]
        h = self._heuristic.estimate(vertex, self._goal)
        self.heuristic_evaluations += 1
        node = SearchNode(len(self._nodes), vertex, h)
        self._nodes.append(node)
        self._index[vertex] = node.index
        return node

    def node(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._index

    def __len__(self) -> int:
        return len(self._nodes)
