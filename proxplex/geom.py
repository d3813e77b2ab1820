from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

PointLike = Union[Pt, Sequence[float]]

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def norm2(a: Pt) -> float:
    return dot(a, a)

def dist2(a: Pt, b: Pt) -> float:
    """Квадрат евклідової відстані (без кореня)."""
    dx = b.x - a.x
    dy = b.y - a.y
    dz = b.z - a.z
    return dx*dx + dy*dy + dz*dz

def as_points(points: Iterable[PointLike]) -> List[Pt]:
    """
    Привести вхід (Pt або трійки чисел) до списку Pt.
    Порядок зберігається: індекс у списку — це ідентифікатор вершини.
    """
    out: List[Pt] = []
    for p in points:
        if isinstance(p, Pt):
            out.append(p)
            continue
        x, y, z = p
        out.append(Pt(float(x), float(y), float(z)))
    return out
