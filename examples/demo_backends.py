import random
import time

from proxplex.distances import DistanceIndex
from proxplex.edges import EdgeExtractor
from proxplex.sampling import generate_points

if __name__ == "__main__":
    pts = generate_points(255, radius=0.5, rng=random.Random(1))

    for backend in ("internal", "scipy"):
        t0 = time.perf_counter()
        index = DistanceIndex(pts, backend=backend)
        t1 = time.perf_counter()
        edges = EdgeExtractor(index).edges_below(0.25)
        print(f"{backend:>8}: {len(index)} pairs in {1000*(t1-t0):.1f} ms, "
              f"{len(edges)} edges below 0.25, max distance {index.max_distance():.3f}")
