import random

import pytest

from proxplex.distances import DistanceIndex
from proxplex.edges import EdgeExtractor
from proxplex.sampling import generate_points

@pytest.fixture
def cloud():
    return generate_points(80, rng=random.Random(11))


def test_corner_edges(corner_points):
    ex = EdgeExtractor(DistanceIndex(corner_points))
    assert ex.edges_below(0.0) == []
    assert ex.edges_below(1.01) == [(0, 1), (0, 2), (0, 3)]
    assert ex.edges_below(1.5) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]


@pytest.mark.parametrize("threshold", [0.05, 0.1, 0.2, 0.35])
def test_prefix_scan_matches_all_pairs(cloud, threshold, brute_force):
    edges = EdgeExtractor(DistanceIndex(cloud)).edges_below(threshold)
    expected, _ = brute_force(cloud, threshold)
    assert set(edges) == expected
    assert len(edges) == len(expected)


def test_edges_are_canonical_and_ordered_by_length(cloud):
    index = DistanceIndex(cloud)
    edges = EdgeExtractor(index).edges_below(0.3)
    assert all(a < b for a, b in edges)
    lengths = [d for d, _ in index.entries[:len(edges)]]
    assert lengths == sorted(lengths)


def test_monotone_in_threshold(cloud):
    ex = EdgeExtractor(DistanceIndex(cloud))
    previous = set()
    for t in (0.0, 0.05, 0.1, 0.15, 0.2, 0.3, 0.5, 1.0):
        current = set(ex.edges_below(t))
        assert previous <= current
        previous = current
