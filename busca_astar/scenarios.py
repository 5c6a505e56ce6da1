"""
Cenários de demonstração sobre grades (SimpleGraph):

1. Grade: vértices (i, j) com arestas bidirecionais de peso unitário nos dois eixos.
2. Morro: arestas horizontais entre as colunas xdim/2 e xdim/2 + 1, na metade
   inferior da grade (linhas 0..ydim/2 - 1), com peso 2 * xdim. Força desvio pela metade superior.
3. Barreiras: arestas interditadas (peso infinito).
4. Lentidão: multiplicador de peso por trecho.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .simple_graph import Edge, SimpleGraph, Vertex

Grid = List[List[Vertex]]


def build_grid(
    xdim: int,
    ydim: int,
    heuristic: Optional[Any] = None,
    weight: float = 1.0,
) -> Tuple[SimpleGraph, Grid]:
    """
    Monta a grade xdim x ydim; grid[i][j] é o vértice em (i, j).
    Heurística padrão do grafo: Taxicab.
    """
    g = SimpleGraph(heuristic)
    grid = [[Vertex(i, j) for j in range(ydim)] for i in range(xdim)]

    # esquerda + direita
    for i in range(xdim - 1):
        for j in range(ydim):
            grid[i][j].add_edges(Edge(grid[i][j], grid[i + 1][j], weight))
            grid[i + 1][j].add_edges(Edge(grid[i + 1][j], grid[i][j], weight))

    # cima + baixo
    for i in range(xdim):
        for j in range(ydim - 1):
            grid[i][j].add_edges(Edge(grid[i][j], grid[i][j + 1], weight))
            grid[i][j + 1].add_edges(Edge(grid[i][j + 1], grid[i][j], weight))

    return g, grid


def edges_between(graph: SimpleGraph, u: Vertex, v: Vertex) -> List[Edge]:
    """Arestas de saída de u cujo alvo é v."""
    return [e for e in graph.outbound_edges(u) if graph.get_target(e) is v]


def apply_hill(
    graph: SimpleGraph,
    grid: Grid,
    weight: Optional[float] = None,
    rows: Optional[Iterable[int]] = None,
) -> None:
    """
    Cenário do morro: peso `weight` (padrão 2 * xdim) nas duas direções entre
    as colunas xdim/2 e xdim/2 + 1, para as linhas em `rows` (padrão: metade inferior).
    """
    xdim, ydim = len(grid), len(grid[0])
    if weight is None:
        weight = 2 * xdim
    if rows is None:
        rows = range(ydim // 2)
    left = xdim // 2
    for j in rows:
        a, b = grid[left][j], grid[left + 1][j]
        for e in edges_between(graph, a, b) + edges_between(graph, b, a):
            graph.set_weight(e, weight)


def apply_barriers(graph: SimpleGraph, blocked: Iterable[Tuple[Vertex, Vertex]]) -> None:
    """
    Aplica barreiras (interdições) em vários trechos.
    blocked: lista de (origem, destino); as arestas origem -> destino ficam com peso infinito.
    """
    for (u, v) in blocked:
        for e in edges_between(graph, u, v):
            graph.set_weight(e, float("inf"))


def apply_traffic_slowdown(
    graph: SimpleGraph,
    edge_multipliers: Dict[Tuple[Vertex, Vertex], float],
) -> None:
    """
    Lentidão de trânsito em trechos específicos: multiplicador de custo por aresta.
    edge_multipliers: dict (origem, destino) -> multiplicador (ex.: 1.5 = 50% mais lento).
    """
    for (u, v), factor in edge_multipliers.items():
        for e in edges_between(graph, u, v):
            graph.set_weight(e, graph.get_weight(e) * factor)
