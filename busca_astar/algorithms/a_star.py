"""
Algoritmo A*: implementação manual sobre o contrato Graph.
Busca heurística com f(n) = g(n) + h(n); a heurística vem de graph.get_heuristic().

Estado por chamada: NodeStore (arena vértice -> nó), fronteira OpenSet e conjunto
fechado de vértices. Nada é reaproveitado entre chamadas.

Desempate na fronteira: menor f, depois menor h, depois o nó inserido mais recentemente.
Arestas com peso infinito são tratadas como interditadas.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, List, Optional, Set, Tuple

from ..graph import Graph
from .frontier import OpenSet
from .search_node import NodeStore, SearchNode

logger = logging.getLogger(__name__)

INF = float("inf")


class SearchStats:
    """Contadores de uma busca (preenchidos por a_star / dijkstra quando fornecidos)."""

    def __init__(self):
        self.expanded = 0
        self.heuristic_evaluations = 0
        self.relaxations = 0
        self.reopened = 0
        self.max_open = 0

    def as_dict(self) -> dict:
        return {
            "expanded": self.expanded,
            "heuristic_evaluations": self.heuristic_evaluations,
            "relaxations": self.relaxations,
            "reopened": self.reopened,
            "max_open": self.max_open,
        }

    def __repr__(self) -> str:
        return f"SearchStats({self.as_dict()})"


def _check_arguments(graph: Any, start: Any, end: Any) -> None:
    missing = [name for name, value in (("graph", graph), ("start", start), ("end", end)) if value is None]
    if missing:
        raise ValueError(f"Argumento(s) obrigatório(s) ausente(s): {', '.join(missing)}")


def _find_goal(
    graph: Graph,
    store: NodeStore,
    start: Hashable,
    end: Hashable,
    stats: SearchStats,
) -> Optional[SearchNode]:
    order = 0
    closed: Set[Hashable] = set()
    open_set = OpenSet()

    n = store.get_node(start)
    n.reset(None, None, 0.0, order)
    order += 1
    open_set.push(n)

    while open_set:
        stats.max_open = max(stats.max_open, len(open_set))
        current = open_set.pop()
        if current.vertex == end:
            return current

        closed.add(current.vertex)
        stats.expanded += 1

        for edge in graph.outbound_edges(current.vertex):
            w = graph.get_weight(edge)
            if w == INF:
                continue
            n = store.get_node(graph.get_target(edge))
            g = current.g + w
            f = g + n.h

            # já existe caminho melhor até um vértice fechado
            if n.vertex in closed and f >= n.f:
                continue

            if n not in open_set or f < n.f:
                if not open_set.remove(n) and n.vertex in closed:
                    stats.reopened += 1
                n.reset(current.index, edge, g, order)
                order += 1
                open_set.push(n)
                stats.relaxations += 1

    return None


def reconstruct_path(store: NodeStore, goal: Optional[SearchNode]) -> List[Any]:
    """Segue os predecessores a partir do objetivo e devolve as arestas na ordem início -> objetivo."""
    path: List[Any] = []
    node = goal
    while node is not None and node.prev is not None:
        path.append(node.edge)
        node = store.node(node.prev)
    path.reverse()
    return path


def a_star(
    graph: Graph,
    start: Hashable,
    end: Hashable,
    stats: Optional[SearchStats] = None,
) -> Tuple[List[Any], float]:
    """
    Retorna (arestas do caminho de start a end, custo total) ou ([], inf) se não houver caminho.
    Para start == end retorna ([], 0.0).

    O resultado só é garantidamente ótimo com heurística admissível; isso não é verificado.
    Pesos negativos não são suportados.
    """
    _check_arguments(graph, start, end)
    if stats is None:
        stats = SearchStats()

    store = NodeStore(graph.get_heuristic(), end)
    goal = _find_goal(graph, store, start, end, stats)
    stats.heuristic_evaluations = store.heuristic_evaluations

    path = reconstruct_path(store, goal)
    cost = goal.g if goal is not None else INF
    logger.debug(
        "a_star %r -> %r: %s",
        start,
        end,
        "encontrado" if goal is not None else "sem caminho",
        extra={"cost": cost, "edges": len(path), **stats.as_dict()},
    )
    return path, cost


def route(graph: Graph, start: Hashable, end: Hashable) -> List[Any]:
    """Arestas do caminho de menor custo entre start e end; lista vazia se não houver caminho ou start == end."""
    path, _ = a_star(graph, start, end)
    return path
