from __future__ import annotations
from typing import List, Tuple

from .distances import DistanceIndex

Edge = Tuple[int, int]  # неорієнтоване ребро (a, b), a < b


class EdgeExtractor:
    """Ребра графа близькості для заданого порогу — префікс DistanceIndex."""

    def __init__(self, index: DistanceIndex):
        self.index = index

    def edges_below(self, threshold: float) -> List[Edge]:
        """
        Усі пари з відстанню строго меншою за threshold, за зростанням відстані.
        Пари вже канонічні (i < j) — так їх зберігає індекс.
        """
        k = self.index.prefix_length(threshold)
        return [pair for _, pair in self.index.entries[:k]]
