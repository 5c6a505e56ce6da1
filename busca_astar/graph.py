"""
Contratos do grafo e da heurística consumidos pela busca, e adaptador NetworkX.

Graph: arestas de saída de um vértice, alvo e peso de uma aresta, heurística do grafo.
Heuristic: estimativa do custo restante de um vértice até outro (admissível = nunca superestima).

O núcleo só lê o grafo; set_weight é operação do chamador entre buscas.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional, Protocol, Tuple, runtime_checkable

import networkx as nx

from .heuristics import Euclidean, as_heuristic


@runtime_checkable
class Heuristic(Protocol):
    def estimate(self, from_: Any, to: Any) -> float:
        """Estimativa (>= 0) do custo de from_ até to. Deve ser admissível para rotas ótimas."""
        ...


@runtime_checkable
class Graph(Protocol):
    """Subconjunto mínimo de um grafo direcionado e ponderado necessário para roteamento."""

    def get_heuristic(self) -> Heuristic: ...

    def outbound_edges(self, source: Any) -> Iterable[Any]: ...

    def get_target(self, edge: Any) -> Any: ...

    def get_weight(self, edge: Any) -> float: ...

    def set_weight(self, edge: Any, w: float) -> None: ...


def path_cost(graph: Graph, edges: Iterable[Any]) -> float:
    """Custo total de um caminho (sequência de arestas)."""
    total = 0.0
    for e in edges:
        total += graph.get_weight(e)
    return total


def validate_path_nodes(G: nx.DiGraph, start: Any, goal: Any) -> None:
    """
    Levanta NetworkXError se start ou goal não existirem no grafo.
    A mensagem inclui uma amostra dos nós do grafo.
    """
    missing = [n for n in (start, goal) if n not in G]
    if not missing:
        return
    nodes_list = list(G.nodes())[:15]
    hint = "Nós neste grafo (amostra): " + str(nodes_list) + ("..." if len(G) > 15 else "")
    raise nx.NetworkXError(f"Nó(s) {missing} não existem no grafo. {hint}")


class NetworkXGraph:
    """
    Adapta um nx.DiGraph ao contrato Graph.

    Arestas são tuplas (u, v); o peso vem do atributo `weight` da aresta (1.0 se ausente).
    Heurística padrão: distância em linha reta sobre o atributo 'pos' = (x, y) dos nós.
    """

    def __init__(
        self,
        G: nx.DiGraph,
        heuristic: Optional[Any] = None,
        weight: str = "weight",
    ):
        self.G = G
        self.weight = weight
        if heuristic is None:
            heuristic = Euclidean(coords=self._pos)
        self._heuristic = as_heuristic(heuristic)

    def _pos(self, n: Hashable) -> Tuple[float, float]:
        return self.G.nodes.get(n, {}).get("pos", (0, 0))

    def get_heuristic(self) -> Heuristic:
        return self._heuristic

    def outbound_edges(self, source: Hashable) -> Iterable[Tuple[Hashable, Hashable]]:
        return [(source, v) for v in self.G.successors(source)]

    def get_target(self, edge: Tuple[Hashable, Hashable]) -> Hashable:
        return edge[1]

    def get_weight(self, edge: Tuple[Hashable, Hashable]) -> float:
        return self.G.edges[edge].get(self.weight, 1.0)

    def set_weight(self, edge: Tuple[Hashable, Hashable], w: float) -> None:
        self.G.edges[edge][self.weight] = w

    def validate(self, start: Hashable, end: Hashable) -> None:
        validate_path_nodes(self.G, start, end)
