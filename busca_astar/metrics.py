"""
Métricas para comparar os algoritmos de busca:

- Latência: tempo médio de uma chamada em milissegundos.
- Custo de caminho a partir de uma lista de vértices.
- Razão de expansões: nós expandidos pelo A* em relação a uma busca de referência (Dijkstra).
"""

import time
from typing import Any, Callable, List, Tuple

from .algorithms.a_star import SearchStats


def measure_latency_ms(
    fn: Callable[[], Any],
    repetitions: int = 1,
) -> Tuple[float, Any]:
    """Média em ms de `repetitions` chamadas de fn(), cada uma cronometrada isoladamente, e o último resultado."""
    if repetitions < 1:
        raise ValueError("repetitions deve ser >= 1")
    samples: List[float] = []
    result = None
    for _ in range(repetitions):
        t0 = time.perf_counter()
        result = fn()
        samples.append((time.perf_counter() - t0) * 1000)
    return sum(samples) / len(samples), result


def path_cost_from_list(
    cost_fn: Callable[[Any, Any], float],
    path: List[Any],
) -> float:
    """Custo total de um caminho de vértices (soma dos custos das arestas)."""
    total = 0.0
    for u, v in zip(path, path[1:]):
        total += cost_fn(u, v)
    return total


def expansion_ratio(stats: SearchStats, baseline: SearchStats) -> float:
    """Expansões de `stats` divididas pelas de `baseline` (1.0 se a referência não expandiu nada)."""
    if baseline.expanded == 0:
        return 1.0
    return stats.expanded / baseline.expanded
