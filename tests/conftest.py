import random
from itertools import combinations
from math import dist

import pytest

from proxplex.geom import Pt


CORNER = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.fixture
def corner_points():
    """Кут тетраедра: три ребра довжини 1 від початку координат, три — √2."""
    return [Pt(*map(float, p)) for p in CORNER]


def brute_force_complex(points, threshold):
    """
    Еталон: усі пари (i < j) напряму, трикутники — перебором усіх трійок.
    Повертає (множина ребер, множина трикутників).
    """
    coords = [tuple(p) for p in points]
    edges = {
        (i, j)
        for i, j in combinations(range(len(coords)), 2)
        if dist(coords[i], coords[j]) < threshold
    }
    triangles = {
        (a, b, c)
        for a, b, c in combinations(range(len(coords)), 3)
        if (a, b) in edges and (a, c) in edges and (b, c) in edges
    }
    return edges, triangles


@pytest.fixture
def brute_force():
    return brute_force_complex
