from __future__ import annotations
from typing import Iterable, Set, Tuple

from .edges import Edge

Triangle = Tuple[int, int, int]  # (a, b, c), a < b < c


def canonical_edge(u: int, v: int) -> Edge:
    return (u, v) if u < v else (v, u)


def closed_triangles(edges: Iterable[Edge]) -> Set[Triangle]:
    """
    Замкнені трикутники (3-кліки) графа, заданого ребрами.

    Для кожного ребра (a, b), a < b, перебираємо вершини v > b серед тих,
    що мають хоч одне ребро, і беремо (a, b, v), якщо є (a, v) і (b, v).
    Порядок a < b < v фіксує єдиний спосіб знайти кожен трикутник,
    тож дублікатів немає і нічого не губиться.
    """
    edge_set: Set[Edge] = {canonical_edge(u, v) for u, v in edges}
    # ізольовані вершини в трикутник не потраплять
    vertices: Set[int] = {i for e in edge_set for i in e}

    result: Set[Triangle] = set()
    for a, b in edge_set:
        for v in vertices:
            if v > b:  # a < b < v
                if (a, v) in edge_set and (b, v) in edge_set:
                    result.add((a, b, v))
    return result


class TriangleDetector:
    """3-кліки поточного набору ребер (не Делоне і не оболонка)."""

    def triangles_for(self, edges: Iterable[Edge]) -> Set[Triangle]:
        return closed_triangles(edges)
