import random

from proxplex.buffers import IndexBuffer
from proxplex.complex import ProximityComplex

if __name__ == "__main__":
    # кут тетраедра: три ребра довжини 1 і три довжини √2
    corner = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]
    cx = ProximityComplex.from_points(corner)
    for d in (0.0, 1.01, 1.5):
        cx.set_threshold(d)
        print(f"d={d}: edges={cx.edges()} triangles={cx.triangles()}")

    # випадкова хмара, як у переглядачі
    cloud = ProximityComplex(n=200, radius=0.5, rng=random.Random(7))
    for d in (0.1, 0.2, 0.25, 0.3):
        cloud.set_threshold(d)
        buf = IndexBuffer.from_complex(cloud)
        print(f"d={d}: {buf.edge_count} edges, {buf.triangle_count} triangles, "
              f"index buffer {buf.data.nbytes} bytes (triangles at +{buf.triangle_offset})")
