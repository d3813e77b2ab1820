from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from math import isnan
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_NUM_VERTICES, DEFAULT_RADIUS
from .distances import DistanceIndex
from .edges import Edge, EdgeExtractor
from .errors import InvalidThreshold
from .geom import PointLike, Pt, as_points
from .sampling import PointCloudGenerator, check_vertex_count
from .triangles import Triangle, TriangleDetector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComplexState:
    """
    Незмінний знімок: поріг + ребра + трикутники, пораховані для цього порогу.
    set_threshold підміняє його одним присвоєнням.
    """
    threshold: float
    edges: Tuple[Edge, ...] = ()
    triangles: Tuple[Triangle, ...] = ()


class ProximityComplex:
    """
    Симпліціальний комплекс глибини 2 над хмарою точок:
      - вершини: точки (генеруються один раз, далі не змінюються);
      - ребра: пари з відстанню < threshold;
      - трикутники: трійки, всі три ребра яких присутні.

    Таблиця відстаней будується один раз у конструкторі;
    set_threshold перераховує лише ребра й трикутники.
    """

    def __init__(
        self,
        n: int = DEFAULT_NUM_VERTICES,
        radius: float = DEFAULT_RADIUS,
        threshold: float = 0.0,
        rng: Optional[random.Random] = None,
        backend: str = "internal",
    ):
        pts = PointCloudGenerator(radius, rng).generate(n)
        self._build(pts, threshold, backend)

    def _build(self, pts: List[Pt], threshold: float, backend: str) -> None:
        self.P: List[Pt] = pts
        self.index = DistanceIndex(self.P, backend=backend)
        self.extractor = EdgeExtractor(self.index)
        self.detector = TriangleDetector()
        self._state = ComplexState(threshold=0.0)

        self.set_threshold(threshold)

    @classmethod
    def from_points(
        cls,
        points: Iterable[PointLike],
        threshold: float = 0.0,
        backend: str = "internal",
    ) -> "ProximityComplex":
        """Комплекс над заданими координатами (Pt або трійки чисел)."""
        pts = as_points(points)
        check_vertex_count(len(pts))
        cx = cls.__new__(cls)
        cx._build(pts, threshold, backend)
        return cx

    # ---------------- Стан ----------------
    def current_threshold(self) -> float:
        return self._state.threshold

    def set_threshold(self, threshold: float) -> None:
        """
        Перерахувати ребра й трикутники для нового порогу.
        NaN -> InvalidThreshold; від'ємний поріг дає порожній комплекс.
        """
        threshold = float(threshold)
        if isnan(threshold):
            raise InvalidThreshold(threshold)

        edges = self.extractor.edges_below(threshold)
        triangles = sorted(self.detector.triangles_for(edges))
        self._state = ComplexState(threshold, tuple(edges), tuple(triangles))

        logger.debug("threshold=%g: %d edges, %d triangles",
                     threshold, len(edges), len(triangles))

    def snapshot(self) -> ComplexState:
        return self._state

    # ---------------- Читання для рендера ----------------
    def vertices(self) -> List[Pt]:
        return list(self.P)

    def edges(self) -> List[Edge]:
        """Ребра за зростанням довжини."""
        return list(self._state.edges)

    def triangles(self) -> List[Triangle]:
        """Трикутники, відсортовані лексикографічно."""
        return list(self._state.triangles)

    def edge_count(self) -> int:
        return len(self._state.edges)

    def triangle_count(self) -> int:
        return len(self._state.triangles)

    def max_distance(self) -> float:
        return self.index.max_distance()

    def __len__(self) -> int:
        return len(self.P)
