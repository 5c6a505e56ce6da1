"""
Conjunto aberto (fronteira) do A*.

Min-heap (heapq) aumentado com um mapa índice do nó -> entrada do heap, para
teste de pertinência e remoção por identidade. Remover marca a entrada como
inválida; entradas inválidas são descartadas no pop. Custos: push, pop e
remove em O(log n) amortizado; pertinência em O(1).

Ordem de prioridade (menor primeiro):
  1. f = g + h;
  2. menor h (mais perto do objetivo);
  3. maior número de ordem (inserido mais recentemente).
"""

from __future__ import annotations

import heapq
from typing import Dict, List

from .search_node import SearchNode

_REMOVED = -1


def priority_key(node: SearchNode) -> tuple:
    """Chave de ordenação do nó na fronteira (f, h, -ordem)."""
    return (node.f, node.h, -node.order)


class OpenSet:
    """Fronteira com no máximo uma entrada viva por nó."""

    def __init__(self):
        self._heap: List[list] = []
        self._entries: Dict[int, list] = {}
        self._nodes: Dict[int, SearchNode] = {}

    def push(self, node: SearchNode) -> None:
        """
        Insere o nó com a prioridade atual. Se o nó já estiver na fronteira,
        a entrada antiga é descartada antes (unicidade por vértice).
        """
        if node.index in self._entries:
            self.remove(node)
        entry = [*priority_key(node), node.index]
        self._entries[node.index] = entry
        self._nodes[node.index] = node
        heapq.heappush(self._heap, entry)

    def pop(self) -> SearchNode:
        """Remove e retorna o nó de menor prioridade. KeyError se vazio."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            index = entry[-1]
            if index == _REMOVED:
                continue
            del self._entries[index]
            return self._nodes.pop(index)
        raise KeyError("pop de fronteira vazia")

    def remove(self, node: SearchNode) -> bool:
        """Remove a entrada do nó, se existir. Retorna True se havia entrada."""
        entry = self._entries.pop(node.index, None)
        if entry is None:
            return False
        entry[-1] = _REMOVED
        del self._nodes[node.index]
        return True

    def __contains__(self, node: SearchNode) -> bool:
        return node.index in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
