import random

import pytest

from proxplex.config import MAX_VERTICES
from proxplex.errors import (
    ConstructionError, InvalidRadius, InvalidVertexCount, SamplingExhausted,
    VertexLimitExceeded,
)
from proxplex.geom import Pt, norm2
from proxplex.sampling import PointCloudGenerator, generate_points


@pytest.mark.parametrize("radius", [0.5, 1.0, 0.2])
def test_points_inside_ball(rng, radius):
    pts = generate_points(200, radius=radius, rng=rng)
    assert len(pts) == 200
    for p in pts:
        assert isinstance(p, Pt)
        assert norm2(p) < radius * radius


def test_coordinates_in_unit_cube(rng):
    for p in generate_points(100, radius=1.0, rng=rng):
        for c in p:
            assert -0.5 <= c < 0.5


def test_seeded_generation_is_reproducible():
    a = generate_points(50, rng=random.Random(7))
    b = generate_points(50, rng=random.Random(7))
    c = generate_points(50, rng=random.Random(8))
    assert a == b
    assert a != c


def test_vertex_limit():
    assert len(generate_points(MAX_VERTICES, rng=random.Random(0))) == 255
    with pytest.raises(VertexLimitExceeded):
        generate_points(256)


def test_vertex_count_lower_bound():
    with pytest.raises(InvalidVertexCount):
        generate_points(0)


@pytest.mark.parametrize("radius", [0.0, -1.0, float("nan")])
def test_invalid_radius(radius):
    with pytest.raises(InvalidRadius):
        PointCloudGenerator(radius)


def test_attempt_cap():
    # куля настільки мала, що кандидати з куба в неї практично не потрапляють
    gen = PointCloudGenerator(1e-9, rng=random.Random(0), attempts_per_point=10)
    with pytest.raises(SamplingExhausted) as exc:
        gen.generate(3)
    assert exc.value.attempts == 30
    assert exc.value.requested == 3


def test_construction_errors_are_value_errors():
    assert issubclass(VertexLimitExceeded, ConstructionError)
    assert issubclass(ConstructionError, ValueError)
