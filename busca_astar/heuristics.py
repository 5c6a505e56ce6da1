"""
Heurísticas para grafos cartesianos (vértices com coordenadas x, y).

Taxicab (Manhattan): movimentos só nos eixos (N, S, L, O).
Diagonal (Chebyshev): permite movimento diagonal com o mesmo custo.
Euclidean: distância em linha reta.
Tiebreaker: decora outra heurística para desempatar caminhos de custo parecido.

Todas são admissíveis desde que o peso de cada aresta seja pelo menos a
distância correspondente entre seus extremos.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Protocol, Tuple

Coords = Callable[[Any], Tuple[float, float]]


class CartesianVertex(Protocol):
    x: float
    y: float


def vertex_xy(v: CartesianVertex) -> Tuple[float, float]:
    """Coordenadas padrão: atributos x e y do vértice."""
    return v.x, v.y


class _FunctionHeuristic:
    def __init__(self, fn: Callable[[Any, Any], float]):
        self._fn = fn

    def estimate(self, from_: Any, to: Any) -> float:
        return self._fn(from_, to)


def as_heuristic(h: Any) -> Any:
    """Aceita um objeto com estimate() ou uma função (from_, to) -> float."""
    if hasattr(h, "estimate"):
        return h
    if callable(h):
        return _FunctionHeuristic(h)
    raise TypeError(f"Heurística inválida: {h!r}")


class _CartesianHeuristic:
    def __init__(self, coords: Optional[Coords] = None):
        self._coords = coords or vertex_xy

    def _deltas(self, from_: Any, to: Any) -> Tuple[float, float]:
        x1, y1 = self._coords(from_)
        x2, y2 = self._coords(to)
        return abs(x1 - x2), abs(y1 - y2)


class Taxicab(_CartesianHeuristic):
    def estimate(self, from_: Any, to: Any) -> float:
        dx, dy = self._deltas(from_, to)
        return dx + dy


class Diagonal(_CartesianHeuristic):
    def estimate(self, from_: Any, to: Any) -> float:
        dx, dy = self._deltas(from_, to)
        return max(dx, dy)


class Euclidean(_CartesianHeuristic):
    def estimate(self, from_: Any, to: Any) -> float:
        dx, dy = self._deltas(from_, to)
        return math.sqrt(dx ** 2 + dy ** 2)


class Tiebreaker(_CartesianHeuristic):
    """
    Soma à estimativa de `delegate` um pequeno múltiplo do módulo do produto
    vetorial entre as posições de from_ e to (em relação à origem).
    Favorece caminhos alinhados com a reta até o objetivo quando há muitos
    caminhos de custo igual. `incr` deve ser pequeno o bastante para não
    quebrar a admissibilidade; isso fica a cargo do chamador.
    """

    def __init__(self, incr: float, delegate: Any, coords: Optional[Coords] = None):
        super().__init__(coords)
        self.incr = incr
        self.delegate = as_heuristic(delegate)

    def estimate(self, from_: Any, to: Any) -> float:
        h = self.delegate.estimate(from_, to)
        x1, y1 = self._coords(from_)
        x2, y2 = self._coords(to)
        return h + self.incr * abs(x1 * y2 - x2 * y1)
