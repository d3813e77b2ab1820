from __future__ import annotations
import logging
import random
from typing import List, Optional

from .config import DEFAULT_RADIUS, MAX_ATTEMPTS_PER_POINT, MAX_VERTICES
from .errors import InvalidRadius, InvalidVertexCount, SamplingExhausted, VertexLimitExceeded
from .geom import Pt

logger = logging.getLogger(__name__)


def check_vertex_count(n: int) -> None:
    """1 <= n <= MAX_VERTICES, інакше ConstructionError."""
    if n > MAX_VERTICES:
        raise VertexLimitExceeded(n, MAX_VERTICES)
    if n < 1:
        raise InvalidVertexCount(n)


class PointCloudGenerator:
    """
    Випадкові точки всередині кулі радіуса R (rejection sampling).

    Кандидат: кожна координата рівномірно з [-0.5, 0.5].
    Приймаємо, якщо x² + y² + z² < R² (строго).
    rng — будь-що з методом random(); для відтворюваності — random.Random(seed).
    """

    def __init__(
        self,
        radius: float = DEFAULT_RADIUS,
        rng: Optional[random.Random] = None,
        attempts_per_point: int = MAX_ATTEMPTS_PER_POINT,
    ):
        # `not radius > 0` ловить і NaN
        if not radius > 0:
            raise InvalidRadius(radius)
        self.radius = float(radius)
        self.rng = rng if rng is not None else random.Random()
        self.attempts_per_point = attempts_per_point

    def _coord(self) -> float:
        return self.rng.random() - 0.5

    def generate(self, n: int) -> List[Pt]:
        check_vertex_count(n)
        r2 = self.radius * self.radius
        max_attempts = self.attempts_per_point * n

        out: List[Pt] = []
        attempts = 0
        while len(out) < n:
            if attempts >= max_attempts:
                raise SamplingExhausted(len(out), n, attempts)
            attempts += 1
            x, y, z = self._coord(), self._coord(), self._coord()
            if x*x + y*y + z*z < r2:
                out.append(Pt(x, y, z))

        logger.debug("Generated %d points (R=%g) in %d attempts", n, self.radius, attempts)
        return out


def generate_points(
    n: int,
    radius: float = DEFAULT_RADIUS,
    rng: Optional[random.Random] = None,
    attempts_per_point: int = MAX_ATTEMPTS_PER_POINT,
) -> List[Pt]:
    return PointCloudGenerator(radius, rng, attempts_per_point).generate(n)
