"""
proxplex — граф близькості та його трикутники над малою 3D хмарою точок.
Поріг відстані -> ребра (пари ближчі за поріг) -> замкнені трикутники (3-кліки).
"""

__version__ = "0.1.0"

from proxplex.geom import Pt
from proxplex.errors import (
    ProxplexError, ConstructionError, VertexLimitExceeded, InvalidVertexCount,
    InvalidRadius, SamplingExhausted, InvalidThreshold,
)
from proxplex.sampling import PointCloudGenerator, generate_points
from proxplex.distances import DistanceIndex
from proxplex.edges import EdgeExtractor
from proxplex.triangles import TriangleDetector, closed_triangles
from proxplex.complex import ComplexState, ProximityComplex
from proxplex.buffers import IndexBuffer, pack_indices

__all__ = [
    "Pt",
    "ProxplexError", "ConstructionError", "VertexLimitExceeded", "InvalidVertexCount",
    "InvalidRadius", "SamplingExhausted", "InvalidThreshold",
    "PointCloudGenerator", "generate_points",
    "DistanceIndex", "EdgeExtractor", "TriangleDetector", "closed_triangles",
    "ComplexState", "ProximityComplex", "IndexBuffer", "pack_indices",
    "__version__",
]
