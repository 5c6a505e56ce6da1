#!/usr/bin/env python3
"""
Compara A* e Dijkstra no cenário da grade com morro (metade inferior com arestas de peso alto).
Imprime custo, latência e nós expandidos para duas rotas: canto a canto e ao longo da base.

Uso (na raiz do projeto):
  python scripts/compare_algorithms.py [tamanho]

Sem argumento, usa BUSCA_ASTAR_GRID_SIZE do .env (padrão 100).
"""
import sys

from busca_astar import SearchStats, Settings, Taxicab, Tiebreaker, a_star, dijkstra
from busca_astar.logging_utils import configure_logging
from busca_astar.metrics import expansion_ratio, measure_latency_ms
from busca_astar.scenarios import apply_hill, build_grid


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)

    size = settings.grid_size
    if len(sys.argv) > 2:
        print("Uso: python scripts/compare_algorithms.py [tamanho]", file=sys.stderr)
        sys.exit(1)
    if len(sys.argv) == 2:
        try:
            size = int(sys.argv[1])
        except ValueError:
            print(f"Erro: tamanho inválido: {sys.argv[1]}", file=sys.stderr)
            sys.exit(1)
    if size < 4:
        print("Erro: tamanho deve ser >= 4", file=sys.stderr)
        sys.exit(1)

    print(f"Construindo grade {size}x{size} com morro...")
    heuristic = Taxicab()
    if settings.tiebreak_increment > 0:
        heuristic = Tiebreaker(settings.tiebreak_increment, heuristic)
    G, grid = build_grid(size, size, heuristic=heuristic)
    apply_hill(G, grid)

    routes = [
        ("inferior esquerdo -> superior direito", grid[0][0], grid[size - 1][size - 1]),
        ("inferior esquerdo -> inferior direito", grid[0][0], grid[size - 1][0]),
    ]
    for label, start, goal in routes:
        a_stats = SearchStats()
        d_stats = SearchStats()
        a_ms, (a_path, a_cost) = measure_latency_ms(lambda: a_star(G, start, goal, stats=a_stats))
        d_ms, (d_path, d_cost) = measure_latency_ms(lambda: dijkstra(G, start, goal, stats=d_stats))
        print(f"{label}:")
        print(f"  A*       custo={a_cost:g} arestas={len(a_path)} expandidos={a_stats.expanded} tempo={a_ms:.1f} ms")
        print(f"  Dijkstra custo={d_cost:g} arestas={len(d_path)} expandidos={d_stats.expanded} tempo={d_ms:.1f} ms")
        print(f"  razão de expansões A*/Dijkstra: {expansion_ratio(a_stats, d_stats):.2f}")


if __name__ == "__main__":
    main()
