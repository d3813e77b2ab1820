from __future__ import annotations
import logging
from bisect import bisect_left, bisect_right
from math import isnan, sqrt
from typing import Iterator, List, Sequence, Tuple

from .errors import InvalidThreshold
from .geom import Pt, dist2

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]                  # (i, j), i < j
DistanceEntry = Tuple[float, Pair]      # (квадрат відстані, пара)


class DistanceIndex:
    """
    Усі попарні відстані між точками, пораховані один раз і відсортовані.

    entries[k] = (d2, (i, j)): d2 — квадрат евклідової відстані, i < j.
    Сортування: за d2 за зростанням, рівні — за (i, j) лексикографічно.

    Поріг порівнюємо з квадратами відстаней (поріг підносимо до квадрата
    один раз на запит), тому коренів при побудові немає.

    backend:
      "internal" — подвійний цикл на чистому Python;
      "scipy"    — scipy.spatial.distance.pdist над numpy-масивом.
    """

    def __init__(self, points: Sequence[Pt], backend: str = "internal"):
        self.points: List[Pt] = list(points)
        self.backend = backend

        name = backend.lower()
        if name == "internal":
            entries = self._build_internal()
        elif name == "scipy":
            entries = self._build_scipy()
        else:
            raise ValueError(f"Unknown backend: {backend}")

        self.entries: List[DistanceEntry] = entries
        # паралельний масив для bisect
        self._d2: List[float] = [d for d, _ in entries]

        # нулі (збіжні точки), якщо є, стоять на самому початку
        coincident = bisect_right(self._d2, 0.0)
        if coincident:
            logger.warning(
                "%d coincident point pair(s): they join for any positive threshold",
                coincident,
            )
        logger.debug("DistanceIndex(%s): %d points, %d pairs",
                     name, len(self.points), len(self.entries))

    # ---------------- Побудова ----------------
    def _build_internal(self) -> List[DistanceEntry]:
        P = self.points
        n = len(P)
        out: List[DistanceEntry] = []
        for i in range(n):
            for j in range(i + 1, n):
                out.append((dist2(P[i], P[j]), (i, j)))
        # кортежі порівнюються як (d2, (i, j)) — саме той tie-break, що треба
        out.sort()
        return out

    def _build_scipy(self) -> List[DistanceEntry]:
        try:
            import numpy as np
            from scipy.spatial.distance import pdist
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy' requires SciPy. "
                "Install scipy or use backend='internal'."
            ) from e

        n = len(self.points)
        if n < 2:
            return []
        arr = np.array([(p.x, p.y, p.z) for p in self.points], dtype=float)
        d2 = pdist(arr, "sqeuclidean")
        # condensed-порядок pdist — це вже (i, j) лексикографічно, тож стабільне
        # сортування зберігає потрібний tie-break
        order = np.argsort(d2, kind="stable")
        ii, jj = np.triu_indices(n, k=1)
        return [(float(d2[k]), (int(ii[k]), int(jj[k]))) for k in order]

    # ---------------- Запити ----------------
    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DistanceEntry]:
        return iter(self.entries)

    def prefix_length(self, threshold: float) -> int:
        """
        Кількість записів із відстанню строго меншою за threshold.
        Записи відсортовані, тож це довжина префікса: перший запис з d2 >= t²
        і всі наступні не проходять.
        """
        if isnan(threshold):
            raise InvalidThreshold(threshold)
        # від'ємний поріг після піднесення до квадрата став би додатним
        if threshold <= 0.0:
            return 0
        t2 = threshold * threshold
        if t2 == 0.0:
            # дуже малий поріг дав 0 при піднесенні до квадрата;
            # збіжні пари (d2 == 0) все одно строго ближчі за нього
            return bisect_right(self._d2, 0.0)
        return bisect_left(self._d2, t2)

    def max_distance(self) -> float:
        """Найбільша (лінійна) попарна відстань; 0.0, якщо пар немає."""
        if not self._d2:
            return 0.0
        return sqrt(self._d2[-1])
