"""
Плоскі буфери для рендера.

Індексний буфер — один масив uint8: спочатку ребра (по 2 індекси),
далі трикутники (по 3). Трикутники починаються зі зсуву 2 * edge_count,
тому кількості ребер і трикутників зберігаються окремо.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .config import MAX_VERTICES
from .edges import Edge
from .errors import VertexLimitExceeded
from .geom import Pt
from .triangles import Triangle


@dataclass(frozen=True)
class IndexBuffer:
    data: np.ndarray        # uint8, len = 2*E + 3*T
    edge_count: int
    triangle_count: int

    @property
    def triangle_offset(self) -> int:
        return 2 * self.edge_count

    def line_indices(self) -> np.ndarray:
        return self.data[:self.triangle_offset].reshape(-1, 2)

    def triangle_indices(self) -> np.ndarray:
        return self.data[self.triangle_offset:].reshape(-1, 3)

    @classmethod
    def from_complex(cls, cx) -> "IndexBuffer":
        # читаємо один знімок, щоб ребра й трикутники були з одного порогу
        state = cx.snapshot()
        return pack_indices(state.edges, state.triangles)


def pack_indices(edges: Sequence[Edge], triangles: Sequence[Triangle]) -> IndexBuffer:
    flat = [i for e in edges for i in e]
    flat.extend(i for t in triangles for i in t)
    if flat:
        if min(flat) < 0:
            raise ValueError(f"Negative vertex index: {min(flat)}")
        if max(flat) >= MAX_VERTICES:
            raise VertexLimitExceeded(max(flat) + 1, MAX_VERTICES)
    return IndexBuffer(
        data=np.asarray(flat, dtype=np.uint8),
        edge_count=len(edges),
        triangle_count=len(triangles),
    )


def vertex_array(points: Iterable[Pt]) -> np.ndarray:
    """(n, 3) float32 — як вершинний буфер."""
    arr = np.array([(p.x, p.y, p.z) for p in points], dtype=np.float32)
    return arr.reshape(-1, 3)


def line_segments(vertices: np.ndarray, buf: IndexBuffer) -> np.ndarray:
    """(E, 2, 3) — відрізки для Line3DCollection."""
    return vertices[buf.line_indices()]


def triangle_polygons(vertices: np.ndarray, buf: IndexBuffer) -> np.ndarray:
    """(T, 3, 3) — трикутники для Poly3DCollection."""
    return vertices[buf.triangle_indices()]
