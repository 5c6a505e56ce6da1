"""
Algoritmo de Dijkstra: implementação manual.
Caminho de custo mínimo em grafo com pesos não negativos (busca exaustiva, sem heurística).
Usa apenas o contrato Graph: arestas de saída, alvo e peso.
Fila de prioridade: heapq (min-heap), entradas obsoletas descartadas no pop.
Serve de referência de otimalidade para o A*.
"""

from __future__ import annotations

import heapq
from typing import Any, Dict, Hashable, List, Optional, Tuple

from ..graph import Graph
from .a_star import INF, SearchStats, _check_arguments


def dijkstra(
    graph: Graph,
    start: Hashable,
    goal: Hashable,
    stats: Optional[SearchStats] = None,
) -> Tuple[List[Any], float]:
    """
    Retorna (arestas do caminho de start a goal, custo total) ou ([], inf) se não houver caminho.

    dist[] e prev[] (aresta de chegada); fila (dist, seq, vértice) com heapq.
    seq evita comparar vértices quando as distâncias empatam.
    """
    _check_arguments(graph, start, goal)
    if stats is None:
        stats = SearchStats()

    dist: Dict[Hashable, float] = {start: 0.0}
    prev: Dict[Hashable, Optional[Tuple[Hashable, Any]]] = {start: None}
    seq = 0
    heap: List[Tuple[float, int, Hashable]] = [(0.0, seq, start)]

    while heap:
        stats.max_open = max(stats.max_open, len(heap))
        d, _, u = heapq.heappop(heap)
        if d > dist.get(u, INF):
            continue
        if u == goal:
            path: List[Any] = []
            cur = prev[goal]
            while cur is not None:
                v, edge = cur
                path.append(edge)
                cur = prev[v]
            path.reverse()
            return path, d

        stats.expanded += 1
        for edge in graph.outbound_edges(u):
            w = graph.get_weight(edge)
            if w == INF:
                continue
            v = graph.get_target(edge)
            alt = d + w
            if alt < dist.get(v, INF):
                dist[v] = alt
                prev[v] = (u, edge)
                seq += 1
                heapq.heappush(heap, (alt, seq, v))
                stats.relaxations += 1

    return [], INF
